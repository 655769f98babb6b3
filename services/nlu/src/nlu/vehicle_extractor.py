"""
Vehicle entity extraction for ServiceBay NLU.

Finds vehicle year, make and model mentions ("2019 Honda Civic",
"Toyota Camry") from POS-tagged tokens.  Each key is set only once: the
first mention in the utterance wins.
"""

from __future__ import annotations

import re

import structlog

from sb_common.models import AnnotatedText, EntityMap, Token

logger = structlog.get_logger()

VEHICLE_YEAR = "vehicle_year"
VEHICLE_MAKE = "vehicle_make"
VEHICLE_MODEL = "vehicle_model"

YEAR_PATTERN = re.compile(r"^(19|20)\d{2}$")

VEHICLE_MAKES: frozenset[str] = frozenset({
    "Honda",
    "Toyota",
    "Ford",
    "Chevrolet",
    "Nissan",
    "BMW",
    "Mercedes",
    "Audi",
    "Volkswagen",
    "Hyundai",
    "Kia",
    "Subaru",
    "Mazda",
    "Jeep",
    "Tesla",
})

_YEAR_POS = frozenset({"CD", "NNP"})


def extract_vehicle_entities(annotated: AnnotatedText, entities: EntityMap) -> None:
    """Add ``vehicle_year``/``vehicle_make``/``vehicle_model`` to *entities*.

    Two patterns are tried on every token:

    * year first: a ``CD``/``NNP`` token shaped like 19xx/20xx, then up to
      two capitalised proper nouns as make and model;
    * make first: a known make tagged ``NNP``, then a capitalised proper
      noun as model.

    Args:
        annotated: The annotated utterance.
        entities: Entity map to extend (set-if-absent writes only).
    """
    for sentence in annotated.sentences:
        tokens = sentence.tokens
        for i, token in enumerate(tokens):
            if token.pos in _YEAR_POS and YEAR_PATTERN.match(token.text):
                entities.set_if_absent(VEHICLE_YEAR, token.text)
                make = _proper_noun_at(tokens, i + 1)
                if make is not None:
                    entities.set_if_absent(VEHICLE_MAKE, make.text)
                    model = _proper_noun_at(tokens, i + 2)
                    if model is not None:
                        entities.set_if_absent(VEHICLE_MODEL, model.text)
            elif _is_proper_noun(token) and token.text in VEHICLE_MAKES:
                entities.set_if_absent(VEHICLE_MAKE, token.text)
                model = _proper_noun_at(tokens, i + 1)
                if model is not None:
                    entities.set_if_absent(VEHICLE_MODEL, model.text)

    if VEHICLE_MAKE in entities or VEHICLE_YEAR in entities:
        logger.debug(
            "vehicle_entities_extracted",
            year=entities.get(VEHICLE_YEAR),
            make=entities.get(VEHICLE_MAKE),
            model=entities.get(VEHICLE_MODEL),
        )


def _is_proper_noun(token: Token) -> bool:
    return token.pos == "NNP" and token.starts_upper


def _proper_noun_at(tokens: list[Token], index: int) -> Token | None:
    if index < len(tokens) and _is_proper_noun(tokens[index]):
        return tokens[index]
    return None
