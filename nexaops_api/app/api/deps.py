"""
FastAPI dependencies giving routes access to shared objects.

The database handle and settings are stored on ``app.state`` by
``create_app``.  Routes ask for them through these functions instead
of importing module level globals, which lets tests build an app
against their own database.
"""

from fastapi import Request

from nexaops_api.app.core.config import Settings
from nexaops_api.app.core.db import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
