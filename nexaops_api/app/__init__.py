"""
Application package initializer.

The project is organised into small layers: ``core`` (configuration,
logging, database and error types), ``schemas`` (Pydantic models for
records returned by the API), ``services`` (validation, persistence
and the resource services built on top of them) and ``api`` (the HTTP
routes).  Each business resource (sales, expenses, inventory) is
described once in ``services/resources.py`` and the same service and
router code is reused for all of them.
"""

from .main import app  # noqa: F401
