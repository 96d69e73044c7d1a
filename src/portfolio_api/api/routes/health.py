"""Health check routes."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, object]:
    """Return liveness and the current server time."""
    return {
        "success": True,
        "message": "API funcionando correctamente",
        "timestamp": datetime.now(UTC).isoformat(),
    }
