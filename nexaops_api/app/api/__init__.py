"""
API package containing the HTTP routes.

``router.py`` assembles the routers from ``endpoints`` under the
``/api`` prefix.  Every response uses the same JSON envelope, built by
the helpers in ``responses.py``.
"""
