"""
Endpoint subpackage.

``records`` builds the create/list router shared by sales, expenses
and inventory; ``notifications`` and ``health`` define their own
routes.  The routers are aggregated in ``api/router.py``.
"""
