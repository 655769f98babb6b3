"""
NLU analysis pipeline for ServiceBay.

Runs the per-utterance components over one :class:`AnnotatedText`:
entity merging, customer-name and vehicle extraction, sentiment
mapping, intent classification, complexity and confidence scoring,
and response synthesis.  The analyzer holds only read-only state
(template tables and the random source), so one instance can serve
concurrent calls.
"""

from __future__ import annotations

import time

import structlog

from sb_common.models import AnnotatedText, EntityMap, NLUResult

from nlu.entity_merger import merge_entities
from nlu.intent_classifier import classify_intent
from nlu.name_extractor import extract_customer_name
from nlu.responses import (
    DEFAULT_TEMPLATES,
    PERSON_NAME_KEY,
    RandomSource,
    ResponseTemplates,
    default_random_source,
    synthesize_response,
)
from nlu.scoring import clamp, complexity_score, overall_confidence
from nlu.sentiment_mapper import map_sentiment
from nlu.vehicle_extractor import extract_vehicle_entities

logger = structlog.get_logger()


class NLUAnalyzer:
    """Pure NLU pipeline over annotated text.

    Sentiment and the POS-based intent rules read only the first
    sentence of multi-sentence input.

    Args:
        templates: Response template tables.
        rng: Random source for template choice (defaults to a shared
            :class:`random.SystemRandom`).
    """

    def __init__(
        self,
        templates: ResponseTemplates = DEFAULT_TEMPLATES,
        rng: RandomSource | None = None,
    ) -> None:
        self._templates = templates
        self._rng = rng or default_random_source()

    def analyze(self, annotated: AnnotatedText) -> NLUResult:
        """Analyse one annotated utterance.

        Args:
            annotated: Output of the annotation engine.

        Returns:
            The assembled :class:`NLUResult`.
        """
        start = time.perf_counter()

        entities = merge_entities(annotated)
        self._extract_vehicle(annotated, entities)
        customer_name = self._extract_name(annotated, entities)
        if customer_name is not None:
            entities.merge(PERSON_NAME_KEY, customer_name)

        sentiment = map_sentiment(annotated)
        intent = classify_intent(annotated)
        complexity = complexity_score(annotated)
        confidence = overall_confidence(entities, sentiment.score, complexity)

        response = synthesize_response(
            intent.intent,
            entities,
            sentiment.label,
            templates=self._templates,
            rng=self._rng,
        )

        elapsed_ms = (time.perf_counter() - start) * 1000
        result = NLUResult(
            entities=entities.as_dict(),
            customer_name=customer_name,
            sentiment=sentiment.label,
            sentiment_score=clamp(sentiment.score, -1.0, 1.0),
            intent=intent.intent,
            intent_confidence=intent.confidence,
            intent_confidences=dict(intent.confidences),
            complexity_score=clamp(complexity, 0.0, 1.0),
            overall_confidence=clamp(confidence, 0.1, 1.0),
            suggested_response=response,
            processing_time=f"{round(elapsed_ms)}ms",
        )
        logger.debug(
            "nlu_analysis_complete",
            intent=result.intent.value,
            sentiment=result.sentiment.value,
            entity_count=len(result.entities),
            duration_ms=round(elapsed_ms, 2),
        )
        return result

    @staticmethod
    def _extract_vehicle(annotated: AnnotatedText, entities: EntityMap) -> None:
        try:
            extract_vehicle_entities(annotated, entities)
        except Exception as exc:
            logger.warning("vehicle_extraction_failed", error=str(exc))

    @staticmethod
    def _extract_name(annotated: AnnotatedText, entities: EntityMap) -> str | None:
        try:
            return extract_customer_name(annotated, entities)
        except Exception as exc:
            logger.warning("customer_name_extraction_failed", error=str(exc))
            return None
