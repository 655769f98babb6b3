"""
Annotated-text data models for ServiceBay.

Defines the read-only structured view of one utterance produced by the
annotation engine: ordered sentences of tokens, each token carrying its
surface text, part-of-speech tag and named-entity tag, plus an optional
per-sentence sentiment class.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

NULL_NER_TAG = "O"


class Token(BaseModel):
    """A single annotated token.

    Attributes:
        text: Surface text of the token (non-empty).
        pos: Penn Treebank part-of-speech tag (``NNP``, ``VBZ``, ...).
        ner: Named-entity tag; ``"O"`` or ``None`` means not an entity.
    """

    model_config = {"frozen": True}

    text: str = Field(..., min_length=1, description="Surface text.")
    pos: str | None = Field(default=None, description="Part-of-speech tag.")
    ner: str | None = Field(default=None, description="Named-entity tag.")

    @property
    def is_entity(self) -> bool:
        """Whether the token carries a non-null NER tag."""
        return self.ner is not None and self.ner != NULL_NER_TAG

    @property
    def starts_upper(self) -> bool:
        """Whether the first character is uppercase."""
        return self.text[:1].isupper()


class Sentence(BaseModel):
    """An ordered run of tokens with an optional sentiment class.

    Attributes:
        tokens: Tokens in utterance order.
        sentiment_class: 0 (very negative) to 4 (very positive), or
            ``None`` when the annotator does not provide sentiment.
    """

    model_config = {"frozen": True}

    tokens: list[Token] = Field(default_factory=list)
    sentiment_class: int | None = Field(default=None, ge=0, le=4)


class AnnotatedText(BaseModel):
    """The full annotated utterance consumed by the NLU pipeline.

    Attributes:
        text: The original utterance text.
        sentences: Sentences in utterance order (may be empty).
    """

    model_config = {"frozen": True}

    text: str = Field(default="", description="Original utterance text.")
    sentences: list[Sentence] = Field(default_factory=list)

    @property
    def first_sentence(self) -> Sentence | None:
        return self.sentences[0] if self.sentences else None

    @property
    def first_token(self) -> Token | None:
        sentence = self.first_sentence
        if sentence is None or not sentence.tokens:
            return None
        return sentence.tokens[0]
