"""
Create/list endpoints shared by every business resource.

``build_router`` returns an ``APIRouter`` with two routes for the
given resource:

* ``POST ""`` validates and stores one record (201, 400 or 500);
* ``GET ""`` lists every record, newest first (200 or 500).

The router is mounted once per resource in ``api/router.py``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from nexaops_api.app.api import responses
from nexaops_api.app.api.deps import get_database
from nexaops_api.app.core.db import Database
from nexaops_api.app.core.errors import PersistenceError, ValidationError
from nexaops_api.app.services.record_store import RecordStore
from nexaops_api.app.services.resource_service import ResourceService
from nexaops_api.app.services.resources import ResourceDescriptor

logger = logging.getLogger(__name__)


def build_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Build the create/list router for ``descriptor``."""
    router = APIRouter()

    def get_service(database: Database = Depends(get_database)) -> ResourceService:
        return ResourceService(descriptor, RecordStore(database, descriptor))

    @router.post("", status_code=201, response_model=None, name=f"create_{descriptor.name}")
    async def create_record(
        payload: Any = Body(None),
        service: ResourceService = Depends(get_service),
    ) -> JSONResponse:
        """Add a new record.

        Returns 201 with the stored record, 400 with every violated
        rule, or 500 if the database rejected the write.
        """
        try:
            record = await service.create(payload)
        except ValidationError as exc:
            return responses.validation_failed(exc.errors)
        except PersistenceError as exc:
            return responses.server_error(f"Failed to add {descriptor.label}", details=exc.message)
        except Exception:
            logger.exception("Unexpected error in %s route", descriptor.name)
            return responses.unexpected_error()
        return responses.success(record, f"{descriptor.title} added successfully")

    @router.get("", response_model=None, name=f"list_{descriptor.name}")
    async def list_records(service: ResourceService = Depends(get_service)) -> JSONResponse:
        """Return every record, most recently created first."""
        try:
            records = await service.list()
        except PersistenceError:
            return responses.server_error(f"Failed to fetch {descriptor.plural_label}")
        except Exception:
            logger.exception("Unexpected error in %s route", descriptor.name)
            return responses.unexpected_error()
        return responses.listing(records)

    return router
