"""
Tests for complexity and confidence scoring.
"""

from __future__ import annotations

import random
from unittest.mock import MagicMock, PropertyMock

import pytest

from sb_common.models import AnnotatedText, EntityMap, Sentence, Token

from nlu.scoring import (
    DEFAULT_COMPLEXITY,
    complexity_score,
    overall_confidence,
    sentence_complexity,
)


class TestSentenceComplexity:
    """Per-sentence factor arithmetic."""

    def test_empty_sentence_is_zero(self) -> None:
        assert sentence_complexity(Sentence(tokens=[])) == 0.0

    def test_factors(self) -> None:
        # 4 tokens: length 0.2, lexical min(2/4, 0.3)=0.3, entities min(1/4, 0.3)=0.25
        sentence = Sentence(tokens=[
            Token(text="John", pos="NNP", ner="PERSON"),
            Token(text="likes", pos="VBZ", ner="O"),
            Token(text="it", pos="PRP", ner="O"),
            Token(text=".", pos=".", ner=None),
        ])
        assert sentence_complexity(sentence) == pytest.approx(0.75)

    def test_length_factor_capped(self) -> None:
        sentence = Sentence(tokens=[Token(text="x", pos="DT", ner="O")] * 40)
        assert sentence_complexity(sentence) == pytest.approx(0.4)

    def test_all_factors_capped(self) -> None:
        sentence = Sentence(tokens=[Token(text="Ford", pos="NNP", ner="ORG")] * 30)
        assert sentence_complexity(sentence) == pytest.approx(1.0)


class TestComplexityScore:
    """Averaging, empty input and failure default."""

    def test_empty_text_is_zero(self) -> None:
        assert complexity_score(AnnotatedText(text="", sentences=[])) == 0.0

    def test_average_over_sentences(self, annotated) -> None:
        text = annotated(
            [("Ford", "NNP", "ORG")] * 30,
            [],
        )
        # (1.0 + 0.0) / 2
        assert complexity_score(text) == pytest.approx(0.5)

    def test_error_returns_default(self) -> None:
        broken = MagicMock(spec=AnnotatedText)
        type(broken).sentences = PropertyMock(side_effect=RuntimeError("boom"))
        assert complexity_score(broken) == DEFAULT_COMPLEXITY

    def test_always_in_unit_range(self) -> None:
        rng = random.Random(7)
        tags = ["NNP", "VB", "JJ", "DT", "IN", None]
        ners = ["O", "PERSON", None, "ORG"]
        for _ in range(200):
            sentences = [
                Sentence(tokens=[
                    Token(text="w", pos=rng.choice(tags), ner=rng.choice(ners))
                    for _ in range(rng.randint(0, 45))
                ])
                for _ in range(rng.randint(1, 4))
            ]
            score = complexity_score(AnnotatedText(text="w", sentences=sentences))
            assert 0.0 <= score <= 1.0


class TestOverallConfidence:
    """Base 0.7 adjusted by entities, sentiment strength, complexity."""

    def test_base(self) -> None:
        assert overall_confidence(EntityMap(), 0.0, 0.2) == pytest.approx(0.7)

    def test_entities_bonus(self) -> None:
        assert overall_confidence(EntityMap({"org": "Ford"}), 0.0, 0.2) == pytest.approx(0.8)

    def test_strong_sentiment_bonus(self) -> None:
        assert overall_confidence(EntityMap(), -1.0, 0.2) == pytest.approx(0.8)

    def test_moderate_sentiment_no_bonus(self) -> None:
        assert overall_confidence(EntityMap(), 0.5, 0.2) == pytest.approx(0.7)

    def test_complexity_penalty(self) -> None:
        assert overall_confidence(EntityMap(), 0.0, 0.9) == pytest.approx(0.6)

    def test_all_adjustments(self) -> None:
        assert overall_confidence(EntityMap({"org": "Kia"}), 1.0, 0.9) == pytest.approx(0.8)

    @pytest.mark.parametrize("entities", [{}, {"a": "b"}])
    @pytest.mark.parametrize("sentiment", [-1.0, -0.5, 0.0, 0.5, 1.0])
    @pytest.mark.parametrize("complexity", [0.0, 0.7, 0.71, 1.0])
    def test_always_in_range(self, entities, sentiment, complexity) -> None:
        assert 0.1 <= overall_confidence(entities, sentiment, complexity) <= 1.0

    def test_error_returns_default(self) -> None:
        broken = MagicMock()
        broken.__len__.side_effect = RuntimeError("boom")
        assert overall_confidence(broken, 0.0, 0.0) == 0.7
