"""
NLU result data models for ServiceBay.

Defines the sentiment and intent enumerations and the immutable
NLUResult returned for every analysed utterance.  Serialised field
names are camelCase (``customerName``, ``sentimentScore``...).
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Sentiment(str, enum.Enum):
    """Coarse sentiment label."""

    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


class Intent(str, enum.Enum):
    """Coarse category of utterance purpose."""

    GREETING = "GREETING"
    QUESTION = "QUESTION"
    REQUEST = "REQUEST"
    COMPLAINT = "COMPLAINT"
    AFFIRMATION = "AFFIRMATION"
    NEGATION = "NEGATION"
    STATEMENT = "STATEMENT"
    UNKNOWN = "UNKNOWN"


class NLUResult(BaseModel):
    """Structured understanding of a single utterance.

    Attributes:
        entities: Entity type → value (includes ``person_name`` and the
            ``vehicle_*`` keys when found).
        customer_name: Extracted customer name, if any.
        sentiment: Sentiment label of the first sentence.
        sentiment_score: Sentiment score in ``[-1.0, 1.0]``.
        intent: Classified intent.
        intent_confidence: Confidence of the classified intent.
        intent_confidences: Intent → confidence (one entry).
        complexity_score: Heuristic complexity in ``[0.0, 1.0]``.
        overall_confidence: Heuristic confidence in ``[0.1, 1.0]``.
        suggested_response: Synthesised reply text.
        processing_time: Wall-clock analysis duration (e.g. ``"12ms"``).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    entities: dict[str, str] = Field(default_factory=dict)
    customer_name: str | None = None
    sentiment: Sentiment = Sentiment.NEUTRAL
    sentiment_score: float = Field(default=0.0, ge=-1.0, le=1.0)
    intent: Intent = Intent.UNKNOWN
    intent_confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    intent_confidences: dict[str, float] = Field(default_factory=dict)
    complexity_score: float = Field(default=0.0, ge=0.0, le=1.0)
    overall_confidence: float = Field(default=0.7, ge=0.1, le=1.0)
    suggested_response: str = ""
    processing_time: str = "0ms"
