"""
Heuristic complexity and confidence scoring for ServiceBay NLU.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from sb_common.models import AnnotatedText, Sentence

logger = structlog.get_logger()

DEFAULT_COMPLEXITY = 0.5
DEFAULT_CONFIDENCE = 0.7

LENGTH_NORMALISER = 20.0
LENGTH_CAP = 0.4
LEXICAL_CAP = 0.3
ENTITY_DENSITY_CAP = 0.3
CONTENT_POS_PREFIXES = ("VB", "NN", "JJ")

BASE_CONFIDENCE = 0.7
CONFIDENCE_STEP = 0.1
STRONG_SENTIMENT = 0.5
HIGH_COMPLEXITY = 0.7
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into ``[low, high]``."""
    return max(low, min(high, value))


def sentence_complexity(sentence: Sentence) -> float:
    """Sum of the capped length, lexical and entity-density factors."""
    count = len(sentence.tokens)
    if count == 0:
        return 0.0

    content = sum(
        1 for t in sentence.tokens
        if t.pos is not None and t.pos.startswith(CONTENT_POS_PREFIXES)
    )
    tagged = sum(1 for t in sentence.tokens if t.is_entity)

    return (
        min(count / LENGTH_NORMALISER, LENGTH_CAP)
        + min(content / count, LEXICAL_CAP)
        + min(tagged / count, ENTITY_DENSITY_CAP)
    )


def complexity_score(annotated: AnnotatedText) -> float:
    """Average sentence complexity of *annotated*, in ``[0.0, 1.0]``.

    Returns ``0.0`` for an utterance without sentences and
    :data:`DEFAULT_COMPLEXITY` if scoring fails.
    """
    try:
        sentences = annotated.sentences
        if not sentences:
            return 0.0
        total = sum(sentence_complexity(s) for s in sentences)
        return clamp(total / len(sentences), 0.0, 1.0)
    except Exception as exc:
        logger.warning("complexity_scoring_failed", error=str(exc))
        return DEFAULT_COMPLEXITY


def overall_confidence(
    entities: Mapping[str, str],
    sentiment_score: float,
    complexity: float,
) -> float:
    """Combine entity presence, sentiment strength and complexity.

    Starts at 0.7; +0.1 when any entity was found, +0.1 for a strong
    sentiment (``|score| > 0.5``), -0.1 for a complex utterance
    (``> 0.7``).  Clamped to ``[0.1, 1.0]``.
    """
    try:
        confidence = BASE_CONFIDENCE
        if len(entities) > 0:
            confidence += CONFIDENCE_STEP
        if abs(sentiment_score) > STRONG_SENTIMENT:
            confidence += CONFIDENCE_STEP
        if complexity > HIGH_COMPLEXITY:
            confidence -= CONFIDENCE_STEP
        return clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE)
    except Exception as exc:
        logger.warning("confidence_scoring_failed", error=str(exc))
        return DEFAULT_CONFIDENCE
