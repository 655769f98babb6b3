"""
Shared Pydantic data models for ServiceBay.

This package contains the annotated-text input models, the entity map
builder, and the NLU result models exchanged with callers.
"""

from sb_common.models.annotation import NULL_NER_TAG, AnnotatedText, Sentence, Token
from sb_common.models.entities import EntityMap, WriteMode
from sb_common.models.nlu_result import Intent, NLUResult, Sentiment

__all__ = [
    "AnnotatedText",
    "EntityMap",
    "Intent",
    "NLUResult",
    "NULL_NER_TAG",
    "Sentence",
    "Sentiment",
    "Token",
    "WriteMode",
]
