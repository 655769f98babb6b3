"""
Customer-name extraction for ServiceBay NLU.

Layered heuristics, first success wins:

1. A plausible ``person`` entity from NER.
2. Self-introduction phrases ("my name is", "I'm", "I am", "call me")
   followed by one or two words, matched case-insensitively.
3. Two capitalised tokens opening the first sentence ("John Doe here").
4. The "Hi, I'm <name>" opener.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import structlog

from sb_common.models import AnnotatedText

logger = structlog.get_logger()

# Case-insensitive throughout, so lowercase words after the phrase also
# count as a name ("i am having trouble" yields "having").
INTRODUCTION_PATTERN = re.compile(
    r"(?:my name is|I'm|I am|call me)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)",
    re.IGNORECASE,
)

_SENTENCE_STARTERS = frozenset({"i", "the"})
_MAX_NAME_WORDS = 3


def extract_customer_name(
    annotated: AnnotatedText,
    entities: Mapping[str, str],
) -> str | None:
    """Return the customer's name, or ``None`` if none is found.

    Args:
        annotated: The annotated utterance.
        entities: Entities merged from NER tags (read only here; the
            caller stores the result under ``person_name``).
    """
    person = entities.get("person")
    if person and _plausible_person(person):
        return person
    return _name_from_rules(annotated)


def _plausible_person(value: str) -> bool:
    return (
        len(value) > 1
        and value.lower() != "customer"
        and len(value.split()) <= _MAX_NAME_WORDS
    )


def _name_from_rules(annotated: AnnotatedText) -> str | None:
    match = INTRODUCTION_PATTERN.search(annotated.text)
    if match:
        return match.group(1).strip()

    sentence = annotated.first_sentence
    if sentence is None or len(sentence.tokens) < 2:
        return None

    first, second = sentence.tokens[0], sentence.tokens[1]
    if (
        first.starts_upper
        and len(first.text) > 1
        and second.starts_upper
        and len(second.text) > 1
        and first.text.lower() not in _SENTENCE_STARTERS
    ):
        return f"{first.text} {second.text}"

    if (
        len(sentence.tokens) >= 3
        and first.text.lower() == "hi,"
        and second.text.lower() == "i'm"
    ):
        return sentence.tokens[2].text

    return None
