"""Shared fixtures for NLU service tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from sb_common.models import AnnotatedText, Sentence, Token

# Set env vars before any sb_common settings are read.
os.environ.setdefault("SB_SENTIMENT_ENABLED", "false")
os.environ.setdefault("SB_LOG_JSON", "false")

TokenSpec = tuple[str, str | None, str | None]


def build_annotated(
    *sentences: Sequence[TokenSpec],
    sentiment: Sequence[int | None] | None = None,
    text: str | None = None,
) -> AnnotatedText:
    """Build an :class:`AnnotatedText` from ``(text, pos, ner)`` triples.

    The utterance text defaults to the space-joined token texts.
    """
    classes = list(sentiment or [])
    built = [
        Sentence(
            tokens=[Token(text=t, pos=p, ner=n) for t, p, n in tokens],
            sentiment_class=classes[i] if i < len(classes) else None,
        )
        for i, tokens in enumerate(sentences)
    ]
    if text is None:
        text = " ".join(t for tokens in sentences for t, _, _ in tokens)
    return AnnotatedText(text=text, sentences=built)


class FixedChoice:
    """Random source that always picks the item at *index*."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.calls: list[tuple[Any, ...]] = []

    def choice(self, seq: Sequence[Any]) -> Any:
        self.calls.append(tuple(seq))
        return seq[self.index % len(seq)]


@pytest.fixture()
def annotated() -> Callable[..., AnnotatedText]:
    """Factory fixture wrapping :func:`build_annotated`."""
    return build_annotated


@pytest.fixture()
def fixed_choice() -> type[FixedChoice]:
    """The :class:`FixedChoice` class, for tests that pin other indices."""
    return FixedChoice


@pytest.fixture()
def first_choice() -> FixedChoice:
    """A random source pinned to the first template."""
    return FixedChoice(0)


@pytest.fixture()
def car_sentence() -> list[TokenSpec]:
    """Tokens for "I have a 2019 Honda Civic"."""
    return [
        ("I", "PRP", "O"),
        ("have", "VBP", "O"),
        ("a", "DT", "O"),
        ("2019", "CD", "DATE"),
        ("Honda", "NNP", "ORG"),
        ("Civic", "NNP", "PRODUCT"),
    ]
