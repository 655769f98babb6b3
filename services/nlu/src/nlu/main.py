"""
NLU service entry point for ServiceBay.

Configures logging, builds the annotation engine and analyzer from
settings, loads models at startup, and exposes the analysis, status and
health endpoints.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
import uvicorn
from fastapi import FastAPI

from sb_common.config import Settings, get_settings
from sb_common.logging import configure_logging

from nlu import health, routes
from nlu.analyzer import NLUAnalyzer
from nlu.annotator import SpacyAnnotator
from nlu.service import NLUService

logger = structlog.get_logger()


def build_service(settings: Settings) -> NLUService:
    """Create an (uninitialised) :class:`NLUService` from *settings*."""
    annotator = SpacyAnnotator(
        model_name=settings.spacy_model,
        sentiment_model=settings.sentiment_model,
        sentiment_enabled=settings.sentiment_enabled,
    )
    return NLUService(annotator, NLUAnalyzer())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan: load models and wire the routers, then clean up."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json, service="nlu")

    logger.info("nlu_service_starting", spacy_model=settings.spacy_model)
    service = build_service(settings)
    if not service.initialize():
        logger.warning("nlu_service_not_ready", status=service.status)

    app.state.nlu_service = service
    routes.configure(service)
    health.configure(service)

    logger.info("nlu_service_ready", status=service.status)
    yield

    logger.info("nlu_service_stopping")
    routes.configure(None)
    health.configure(None)
    logger.info("nlu_service_stopped")


def create_app() -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    app = FastAPI(title="ServiceBay NLU Service", version="0.1.0", lifespan=lifespan)
    app.include_router(routes.router, prefix="/api/v1")
    app.include_router(health.router)
    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "nlu.main:app",
        host=_settings.api_host,
        port=_settings.nlu_port,
        log_level=_settings.log_level.lower(),
    )
