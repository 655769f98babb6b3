"""
NLU analysis API router for ServiceBay.

``POST /nlu/analyze`` runs the pipeline on one utterance; ``GET
/nlu/status`` reports readiness.  Service errors map to 400 (bad input),
503 (not ready) and 500 (analysis failure).
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from sb_common.models import NLUResult

from nlu.errors import AnalysisError, InvalidInputError, NotReadyError
from nlu.service import STATUS_NOT_INITIALIZED, NLUService

router = APIRouter(prefix="/nlu", tags=["nlu"])

_service: NLUService | None = None


def configure(service: NLUService | None) -> None:
    """Inject the service used by the routes."""
    global _service  # noqa: PLW0603
    _service = service


class AnalyzeRequest(BaseModel):
    text: str | None = None


class StatusResponse(BaseModel):
    initialized: bool
    status: str


@router.post("/analyze", response_model=NLUResult)
async def analyze(request: AnalyzeRequest) -> NLUResult:
    if _service is None:
        raise HTTPException(status_code=503, detail="NLU service not initialized")
    try:
        # Annotation is CPU-bound; keep it off the event loop
        return await asyncio.to_thread(_service.analyze, request.text)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotReadyError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except AnalysisError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/status", response_model=StatusResponse)
async def status() -> StatusResponse:
    if _service is None:
        return StatusResponse(initialized=False, status=STATUS_NOT_INITIALIZED)
    return StatusResponse(initialized=_service.is_initialized, status=_service.status)
