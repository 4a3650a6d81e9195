from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
def health() -> dict[str, Any]:
    """Reports liveness."""
    return {
        "status": "ok",
        "service": "envbind",
        "time": datetime.now(UTC).isoformat(),
    }


@router.get("/ping", summary="Ping")
def ping() -> str:
    """Returns 'pong'."""
    return "pong"
