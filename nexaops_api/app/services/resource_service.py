"""
Service layer shared by every business resource.

``ResourceService`` composes a validator and a ``RecordStore`` into
the two operations the API offers for sales, expenses and inventory:
``create`` and ``list``.  It holds no state of its own and performs no
business logic beyond validation and delegation.
"""

import logging
from typing import Any, List

from pydantic import BaseModel

from nexaops_api.app.core.errors import ValidationError
from nexaops_api.app.services.record_store import RecordStore
from nexaops_api.app.services.resources import ResourceDescriptor

logger = logging.getLogger(__name__)


class ResourceService:
    """Create and list records of one resource kind."""

    def __init__(self, descriptor: ResourceDescriptor, store: RecordStore) -> None:
        self.descriptor = descriptor
        self.store = store

    async def create(self, payload: Any) -> BaseModel:
        """Validate ``payload`` and persist it.

        Raises ``ValidationError`` listing every broken rule (the store
        is not touched in that case) or ``PersistenceError`` if the
        insert fails.  On success the stored record is returned as is.
        """
        result = self.descriptor.validator(payload)
        if not result.valid:
            logger.info(
                "Rejected %s payload: %s", self.descriptor.label, "; ".join(result.errors)
            )
            raise ValidationError(result.errors)
        return self.store.insert(self.descriptor.clean(payload))

    async def list(self) -> List[BaseModel]:
        """Return all records, newest first."""
        return self.store.list_all()
