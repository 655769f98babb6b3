"""
Annotation engine adapter for ServiceBay NLU.

Wraps a spaCy pipeline (tokenization, sentence split, Penn Treebank POS
tags, NER) and a Hugging Face five-class sentiment model, and turns
their output into the :class:`AnnotatedText` view consumed by the
analyzer.
"""

from __future__ import annotations

import re
from typing import Any

import spacy
import structlog
from transformers import pipeline as hf_pipeline

from sb_common.models import NULL_NER_TAG, AnnotatedText, Sentence, Token

logger = structlog.get_logger()

DEFAULT_SPACY_MODEL = "en_core_web_sm"
DEFAULT_SENTIMENT_MODEL = "nlptown/bert-base-multilingual-uncased-sentiment"

# nlptown labels look like "1 star" ... "5 stars".
_STAR_LABEL = re.compile(r"^\s*([1-5])\s+stars?\s*$", re.IGNORECASE)


def star_label_to_class(label: str) -> int | None:
    """Map a ``"N star(s)"`` label to sentiment class ``N - 1``."""
    match = _STAR_LABEL.match(label)
    if match is None:
        return None
    return int(match.group(1)) - 1


class SpacyAnnotator:
    """spaCy + transformers implementation of the annotation engine.

    Models are loaded once at :meth:`load` time; :meth:`annotate` only
    reads them.

    Args:
        model_name: spaCy pipeline to load.
        sentiment_model: Hugging Face model id for sentence sentiment.
        sentiment_enabled: Skip the sentiment model entirely when false.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_SPACY_MODEL,
        sentiment_model: str = DEFAULT_SENTIMENT_MODEL,
        sentiment_enabled: bool = True,
    ) -> None:
        self._model_name = model_name
        self._sentiment_model = sentiment_model
        self._sentiment_enabled = sentiment_enabled
        self._nlp: Any | None = None
        self._sentiment: Any | None = None

    # ── lifecycle ──

    def load(self) -> None:
        """Load the spaCy pipeline and, if enabled, the sentiment model."""
        self._nlp = spacy.load(self._model_name)
        logger.info("spacy_model_loaded", model=self._model_name)
        if self._sentiment_enabled:
            self._sentiment = hf_pipeline(
                "sentiment-analysis",
                model=self._sentiment_model,
                truncation=True,
            )
            logger.info("sentiment_model_loaded", model=self._sentiment_model)

    @property
    def is_ready(self) -> bool:
        """Whether the spaCy pipeline has been loaded."""
        return self._nlp is not None

    # ── annotation ──

    def annotate(self, text: str) -> AnnotatedText:
        """Annotate *text*.

        Raises:
            RuntimeError: If :meth:`load` has not been called.
        """
        if self._nlp is None:
            raise RuntimeError("Annotator not loaded")

        doc = self._nlp(text)
        spans = list(doc.sents)
        classes = self._sentence_classes([span.text for span in spans])

        sentences = [
            Sentence(
                tokens=[
                    Token(
                        text=tok.text,
                        pos=tok.tag_ or None,
                        ner=tok.ent_type_ or NULL_NER_TAG,
                    )
                    for tok in span
                    if tok.text.strip()
                ],
                sentiment_class=sentiment_class,
            )
            for span, sentiment_class in zip(spans, classes)
        ]
        return AnnotatedText(text=text, sentences=sentences)

    def _sentence_classes(self, texts: list[str]) -> list[int | None]:
        if self._sentiment is None or not texts:
            return [None] * len(texts)
        raw: list[dict[str, Any]] = self._sentiment(texts)
        classes = [star_label_to_class(str(entry.get("label", ""))) for entry in raw]
        return (classes + [None] * len(texts))[: len(texts)]
