"""
Rule-cascade intent classification for ServiceBay NLU.

Keyword rules are checked first, in a fixed order, against the whole
lowercased utterance; POS rules then look at the first token of the
first sentence.  The first matching rule wins, so the order of
:data:`KEYWORD_RULES` is significant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import structlog

from sb_common.models import AnnotatedText, Intent

logger = structlog.get_logger()

RULE_CONFIDENCE = 0.7


def _word_pattern(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


@dataclass(frozen=True)
class KeywordRule:
    """An intent selected when *pattern* matches the lowercased text."""

    intent: Intent
    pattern: re.Pattern[str]


KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        Intent.GREETING,
        _word_pattern(
            "hello", "hi", "hey", "good morning", "good afternoon",
            "good evening", "howdy", "greetings",
        ),
    ),
    KeywordRule(
        Intent.AFFIRMATION,
        _word_pattern(
            "yes", "yeah", "yep", "sure", "ok", "okay", "right", "correct",
            "confirm", "absolutely", "definitely",
        ),
    ),
    KeywordRule(
        Intent.NEGATION,
        _word_pattern("no", "nope", "not", "never", "wrong", "incorrect", "cancel"),
    ),
    # Substring match: "issues", "badly" and "problematic" count too.
    KeywordRule(
        Intent.COMPLAINT,
        re.compile("problem|issue|complaint|terrible|awful|bad"),
    ),
)

QUESTION_OPENERS = frozenset({
    "can", "could", "would", "will", "do", "does", "did", "is", "are", "was", "were",
})

REQUEST_PHRASES = ("i need", "i want", "i would like", "please")


@dataclass(frozen=True)
class IntentReading:
    """Classified intent with its confidence table.

    Attributes:
        intent: The winning intent.
        confidence: Confidence of *intent*.
        confidences: Intent code → confidence (single entry).
    """

    intent: Intent
    confidence: float = RULE_CONFIDENCE
    confidences: dict[str, float] = field(default_factory=dict)

    @classmethod
    def of(cls, intent: Intent) -> IntentReading:
        return cls(
            intent=intent,
            confidence=RULE_CONFIDENCE,
            confidences={intent.value: RULE_CONFIDENCE},
        )


def classify_intent(annotated: AnnotatedText) -> IntentReading:
    """Classify the intent of *annotated*.

    Returns:
        An :class:`IntentReading`; ``UNKNOWN`` when the utterance has no
        tokens or classification fails.
    """
    try:
        return IntentReading.of(_classify(annotated))
    except Exception as exc:
        logger.warning("intent_classification_failed", error=str(exc))
        return IntentReading.of(Intent.UNKNOWN)


def _classify(annotated: AnnotatedText) -> Intent:
    first = annotated.first_token
    if first is None:
        return Intent.UNKNOWN

    text = annotated.text.lower()
    for rule in KEYWORD_RULES:
        if rule.pattern.search(text):
            return rule.intent

    first_pos = first.pos or ""
    if first_pos.startswith("W") or first.text.lower() in QUESTION_OPENERS:
        return Intent.QUESTION

    if first_pos.startswith("VB"):
        return Intent.REQUEST
    if any(phrase in text for phrase in REQUEST_PHRASES):
        return Intent.REQUEST

    return Intent.STATEMENT
