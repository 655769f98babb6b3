"""
Sentiment class mapping for ServiceBay NLU.

Converts the annotator's five-point sentence sentiment class
(0 = very negative ... 4 = very positive) into a coarse label and a
score on the ``[-1.0, 1.0]`` scale.  Only the first sentence is read.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from sb_common.models import AnnotatedText, Sentiment

logger = structlog.get_logger()


@dataclass(frozen=True)
class SentimentReading:
    """Sentiment of an utterance.

    Attributes:
        label: Coarse sentiment label.
        score: Score in ``[-1.0, 1.0]``.
    """

    label: Sentiment
    score: float


NEUTRAL_READING = SentimentReading(label=Sentiment.NEUTRAL, score=0.0)

SENTIMENT_CLASS_TABLE: dict[int, SentimentReading] = {
    0: SentimentReading(label=Sentiment.NEGATIVE, score=-1.0),
    1: SentimentReading(label=Sentiment.NEGATIVE, score=-0.5),
    2: NEUTRAL_READING,
    3: SentimentReading(label=Sentiment.POSITIVE, score=0.5),
    4: SentimentReading(label=Sentiment.POSITIVE, score=1.0),
}


def reading_for_class(sentiment_class: int | None) -> SentimentReading:
    """Look up the reading for a raw sentiment class (neutral if unknown)."""
    if sentiment_class is None:
        return NEUTRAL_READING
    return SENTIMENT_CLASS_TABLE.get(sentiment_class, NEUTRAL_READING)


def map_sentiment(annotated: AnnotatedText) -> SentimentReading:
    """Return the sentiment of the first sentence of *annotated*."""
    try:
        sentence = annotated.first_sentence
        if sentence is None:
            return NEUTRAL_READING
        return reading_for_class(sentence.sentiment_class)
    except Exception as exc:
        logger.warning("sentiment_mapping_failed", error=str(exc))
        return NEUTRAL_READING
