"""
NLU service facade for ServiceBay.

Owns the annotation engine and the analyzer, tracks initialisation
state, validates input, and wraps unexpected failures so callers can
tell "not ready", "bad input" and "analysis failed" apart.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from sb_common.models import AnnotatedText, NLUResult

from nlu.analyzer import NLUAnalyzer
from nlu.errors import AnalysisError, InvalidInputError, NotReadyError

logger = structlog.get_logger()

STATUS_NOT_INITIALIZED = "Not initialized"
STATUS_PIPELINE_MISSING = "Pipeline is null"
STATUS_READY = "Ready"


class Annotator(Protocol):
    """The annotation engine interface used by :class:`NLUService`."""

    def load(self) -> None: ...

    @property
    def is_ready(self) -> bool: ...

    def annotate(self, text: str) -> AnnotatedText: ...


class NLUService:
    """Validating, fail-safe front door to the NLU pipeline.

    Args:
        annotator: Annotation engine (loaded by :meth:`initialize`).
        analyzer: Pipeline run over the annotated text.
    """

    def __init__(self, annotator: Annotator, analyzer: NLUAnalyzer | None = None) -> None:
        self._annotator = annotator
        self._analyzer = analyzer or NLUAnalyzer()
        self._initialized = False

    # ── lifecycle ──

    def initialize(self) -> bool:
        """Load the annotation engine.

        A load failure is logged and leaves the service not ready.

        Returns:
            Whether the service is ready.
        """
        try:
            self._annotator.load()
            self._initialized = True
            logger.info("nlu_service_initialized")
        except Exception:
            logger.exception("nlu_service_initialization_failed")
            self._initialized = False
        return self._initialized

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def status(self) -> str:
        """Human-readable readiness status."""
        if not self._initialized:
            return STATUS_NOT_INITIALIZED
        if not self._annotator.is_ready:
            return STATUS_PIPELINE_MISSING
        return STATUS_READY

    # ── analysis ──

    def analyze(self, text: str | None) -> NLUResult:
        """Annotate and analyse one utterance.

        Args:
            text: Raw utterance text.

        Returns:
            The :class:`NLUResult`.

        Raises:
            NotReadyError: The annotation engine is not initialised.
            InvalidInputError: *text* is ``None``, empty or whitespace.
            AnalysisError: Annotation or analysis raised unexpectedly.
        """
        if not self._initialized or not self._annotator.is_ready:
            raise NotReadyError("NLU annotation engine not initialized")
        if text is None or not text.strip():
            raise InvalidInputError("Text cannot be null or empty")

        try:
            annotated = self._annotator.annotate(text.strip())
            return self._analyzer.analyze(annotated)
        except Exception as exc:
            logger.exception("nlu_analysis_failed", text_length=len(text))
            raise AnalysisError(f"NLU analysis failed: {exc}") from exc
