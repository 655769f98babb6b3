"""
Entity span merging for ServiceBay NLU.

Collapses contiguous runs of tokens sharing the same non-null NER tag
into a single entity value keyed by the lowercase tag.  Spans from later
sentences overwrite same-type spans from earlier ones.
"""

from __future__ import annotations

import structlog

from sb_common.models import AnnotatedText, EntityMap

logger = structlog.get_logger()


def merge_entities(annotated: AnnotatedText) -> EntityMap:
    """Build the entity map from the NER tags of *annotated*.

    Args:
        annotated: The annotated utterance.

    Returns:
        An :class:`EntityMap`; empty if no entity is tagged or if merging
        fails.
    """
    entities = EntityMap()
    try:
        for sentence in annotated.sentences:
            current_type: str | None = None
            parts: list[str] = []

            for token in sentence.tokens:
                if token.is_entity:
                    if token.ner != current_type:
                        _flush(entities, current_type, parts)
                        current_type = token.ner
                        parts = [token.text]
                    else:
                        parts.append(token.text)
                else:
                    _flush(entities, current_type, parts)
                    current_type = None
                    parts = []

            # sentence ended inside a span
            _flush(entities, current_type, parts)
    except Exception as exc:
        logger.warning("entity_merge_failed", error=str(exc))
        return EntityMap()
    return entities


def _flush(entities: EntityMap, entity_type: str | None, parts: list[str]) -> None:
    if entity_type is None or not parts:
        return
    entities.merge(entity_type, " ".join(parts))
