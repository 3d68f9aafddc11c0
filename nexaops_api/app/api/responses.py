"""
Helpers building the JSON envelope returned by every endpoint.

Successful responses look like ``{"success": true, "data": ...}``
plus a ``message`` or ``count``; failures look like
``{"success": false, "error": "...", ...}`` with either ``details``
or a generic ``message``.  Internal error details are never placed in
a response body.
"""

from typing import Any, Iterable, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

INTERNAL_ERROR_MESSAGE = "Internal server error"


def success(data: Any, message: str, status_code: int = status.HTTP_201_CREATED) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data), "message": message},
    )


def listing(items: list) -> JSONResponse:
    data = jsonable_encoder(items)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "data": data, "count": len(data)},
    )


def validation_failed(errors: Iterable[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": "Validation failed", "details": list(errors)},
    )


def server_error(error: str, details: Optional[str] = None) -> JSONResponse:
    """Return a 500 envelope.

    With ``details`` the opaque persistence message is included;
    without it the generic ``"Internal server error"`` message is used.
    """
    content: dict = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    else:
        content["message"] = INTERNAL_ERROR_MESSAGE
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def unexpected_error() -> JSONResponse:
    return server_error("Unexpected server error")
