"""Health check endpoint."""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    """Report that the API process is up.

    The database is not queried; use ``python -m nexaops_api.app.seed
    --check`` to test connectivity.
    """
    return {
        "status": "OK",
        "message": "NexaOps API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }
