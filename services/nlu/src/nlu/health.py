"""
Health check endpoint for ServiceBay NLU service.

Exposes a /health endpoint returning service status and annotation
engine readiness.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from nlu.service import STATUS_READY, NLUService

router = APIRouter()

# Module-level reference set by main.py at startup
_service: NLUService | None = None


def configure(service: NLUService | None) -> None:
    """Inject the service reference for the health endpoint."""
    global _service  # noqa: PLW0603
    _service = service


@router.get("/health")
async def health() -> JSONResponse:
    """Return NLU service health status."""
    ready = _service is not None and _service.status == STATUS_READY
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "service": "nlu",
            "status": "ok" if ready else "degraded",
            "annotator_ready": ready,
        },
    )
