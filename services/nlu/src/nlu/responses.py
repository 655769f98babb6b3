"""
Templated response synthesis for ServiceBay NLU.

Template tables are built once at import time and never mutated; they
are shared read-only across concurrent analyses.  Template choice goes
through an injectable random source so tests can pin the outcome.
"""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Protocol, TypeVar

from sb_common.models import Intent, Sentiment

T = TypeVar("T")

DEFAULT_RESPONSE = "I'm here to help you."
PERSON_NAME_KEY = "person_name"


class RandomSource(Protocol):
    """Anything with a :meth:`random.Random.choice`-compatible method."""

    def choice(self, seq: Sequence[T]) -> T: ...


class ResponseTemplates:
    """Immutable intent → candidate-reply tables.

    Args:
        tables: Mapping of intent code to an ordered list of replies.
            Empty lists are dropped.
    """

    def __init__(self, tables: Mapping[str, Sequence[str]]) -> None:
        self._tables: Mapping[str, tuple[str, ...]] = MappingProxyType({
            key: tuple(replies) for key, replies in tables.items() if replies
        })

    def get(self, key: str) -> tuple[str, ...]:
        """Return the replies for *key* (empty tuple if none)."""
        return self._tables.get(key, ())

    def choose(self, key: str, rng: RandomSource) -> str:
        """Pick a reply for *key*.

        Unknown keys fall back to the ``UNKNOWN`` table, then to
        :data:`DEFAULT_RESPONSE`.
        """
        replies = self.get(key) or self.get(Intent.UNKNOWN.value)
        if not replies:
            return DEFAULT_RESPONSE
        return rng.choice(replies)

    def __contains__(self, key: object) -> bool:
        return key in self._tables


DEFAULT_TEMPLATES = ResponseTemplates({
    Intent.GREETING.value: [
        "Hello! I'm your auto service assistant. How can I help you today?",
        "Hi there! Welcome. What can I do for you?",
        "Good day! How may I assist you with your automotive needs?",
    ],
    Intent.QUESTION.value: [
        "That's a good question. What specifically would you like to know?",
        "I can help with that. What information are you looking for?",
    ],
    Intent.REQUEST.value: [
        "I can help with that request. Please tell me more.",
        "Understood. What exactly do you need assistance with?",
    ],
    Intent.COMPLAINT.value: [
        "I understand your concern. Please tell me more about the issue.",
        "I'm sorry to hear that. How can I help resolve this problem?",
    ],
    Intent.AFFIRMATION.value: [
        "Great!",
        "Understood.",
        "Okay.",
    ],
    Intent.NEGATION.value: [
        "No problem.",
        "Understood. Is there anything else I can help with?",
    ],
    Intent.UNKNOWN.value: [
        "I'm not sure I understand. Could you rephrase that?",
        "I'm still learning. Can you provide more details?",
    ],
})

# SystemRandom draws from os.urandom and is safe to share across threads.
_system_random = random.SystemRandom()


def default_random_source() -> RandomSource:
    return _system_random


def synthesize_response(
    intent: Intent,
    entities: Mapping[str, str],
    sentiment: Sentiment,
    templates: ResponseTemplates = DEFAULT_TEMPLATES,
    rng: RandomSource | None = None,
) -> str:
    """Build the suggested reply for a classified utterance.

    A greeting is personalised when ``person_name`` was extracted.  Any
    other intent uses its own table; intents without one (``STATEMENT``)
    fall back to the ``UNKNOWN`` table.

    Args:
        intent: Classified intent.
        entities: Entities extracted from the utterance.
        sentiment: Sentiment label of the utterance.
        templates: Template tables to draw from.
        rng: Random source for template choice.

    Returns:
        The reply text.
    """
    rng = rng or default_random_source()

    if intent is Intent.GREETING:
        greeting = templates.choose(Intent.GREETING.value, rng)
        name = entities.get(PERSON_NAME_KEY)
        if name:
            return f"{greeting} {name}! How can I help you today?"
        return greeting

    if intent is Intent.COMPLAINT and sentiment is Sentiment.NEGATIVE:
        return templates.choose(Intent.COMPLAINT.value, rng)

    return templates.choose(intent.value, rng)
