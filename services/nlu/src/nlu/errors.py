"""
Error types raised at the ServiceBay NLU service boundary.

Component failures inside the pipeline never surface; they degrade to
documented defaults.  Only these errors reach callers.
"""

from __future__ import annotations


class NLUError(Exception):
    """Base class for NLU service errors."""


class NotReadyError(NLUError):
    """The annotation engine is not initialised."""


class InvalidInputError(NLUError, ValueError):
    """The utterance is missing, empty, or whitespace only."""


class AnalysisError(NLUError):
    """Annotation or analysis failed outside the component safety nets."""
