"""
Notification endpoint.

``POST /api/notifications`` sends a WhatsApp or SMS reminder in demo
mode: the request is validated and logged, nothing is delivered.  A
successful call returns 200 rather than 201 because no resource is
created.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from nexaops_api.app.api import responses
from nexaops_api.app.api.deps import get_settings
from nexaops_api.app.core.config import Settings
from nexaops_api.app.core.errors import ValidationError
from nexaops_api.app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_notification_service(settings: Settings = Depends(get_settings)) -> NotificationService:
    return NotificationService(settings)


@router.post("", response_model=None)
async def send_notification(
    payload: Any = Body(None),
    service: NotificationService = Depends(get_notification_service),
) -> JSONResponse:
    """Send a test reminder notification (demo mode)."""
    try:
        notification = await service.send(payload)
    except ValidationError as exc:
        return responses.validation_failed(exc.errors)
    except Exception:
        logger.exception("Error sending notification")
        return responses.server_error("Failed to send notification")
    return responses.success(
        notification,
        "Notification sent successfully (demo mode)",
        status_code=200,
    )
