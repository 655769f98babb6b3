"""
Tests for vehicle entity extraction.

Validates the year-first and make-first patterns and the first-match-wins
behaviour of the set-if-absent writes.
"""

from __future__ import annotations

from sb_common.models import EntityMap

from nlu.vehicle_extractor import VEHICLE_MAKES, extract_vehicle_entities


class TestYearFirst:
    """Year followed by make and model."""

    def test_year_make_model(self, annotated, car_sentence) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated(car_sentence), entities)
        assert entities["vehicle_year"] == "2019"
        assert entities["vehicle_make"] == "Honda"
        assert entities["vehicle_model"] == "Civic"

    def test_year_tagged_nnp(self, annotated) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated([("1998", "NNP", "O")]), entities)
        assert entities["vehicle_year"] == "1998"

    def test_year_with_unknown_make(self, annotated) -> None:
        entities = EntityMap()
        text = annotated([("2021", "CD", "O"), ("Rivian", "NNP", "O"), ("R1T", "NNP", "O")])
        extract_vehicle_entities(text, entities)
        assert entities["vehicle_make"] == "Rivian"
        assert entities["vehicle_model"] == "R1T"

    def test_year_without_proper_noun(self, annotated) -> None:
        entities = EntityMap()
        text = annotated([("2015", "CD", "O"), ("was", "VBD", "O"), ("fine", "JJ", "O")])
        extract_vehicle_entities(text, entities)
        assert entities["vehicle_year"] == "2015"
        assert "vehicle_make" not in entities

    def test_non_year_number_ignored(self, annotated) -> None:
        entities = EntityMap()
        text = annotated([("3000", "CD", "O"), ("Ford", "NNP", "O")])
        extract_vehicle_entities(text, entities)
        assert "vehicle_year" not in entities
        # Make-first still picks up the known make
        assert entities["vehicle_make"] == "Ford"

    def test_year_wrong_pos_ignored(self, annotated) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated([("2019", "NN", "O")]), entities)
        assert len(entities) == 0


class TestMakeFirst:
    """Known make followed by model."""

    def test_make_and_model(self, annotated) -> None:
        entities = EntityMap()
        text = annotated([("my", "PRP$", "O"), ("Toyota", "NNP", "O"), ("Camry", "NNP", "O")])
        extract_vehicle_entities(text, entities)
        assert entities["vehicle_make"] == "Toyota"
        assert entities["vehicle_model"] == "Camry"
        assert "vehicle_year" not in entities

    def test_make_at_sentence_end(self, annotated) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated([("a", "DT", "O"), ("Tesla", "NNP", "O")]), entities)
        assert entities["vehicle_make"] == "Tesla"
        assert "vehicle_model" not in entities

    def test_unknown_make_ignored(self, annotated) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated([("Lada", "NNP", "O"), ("Niva", "NNP", "O")]), entities)
        assert len(entities) == 0

    def test_make_needs_nnp(self, annotated) -> None:
        entities = EntityMap()
        extract_vehicle_entities(annotated([("Honda", "NN", "O")]), entities)
        assert len(entities) == 0

    def test_make_list(self) -> None:
        assert len(VEHICLE_MAKES) == 15
        assert "BMW" in VEHICLE_MAKES


class TestFirstMatchWins:
    """Later mentions never overwrite earlier ones."""

    def test_second_year_does_not_overwrite(self, annotated, car_sentence) -> None:
        entities = EntityMap()
        text = annotated(
            car_sentence,
            [("and", "CC", "O"), ("a", "DT", "O"), ("2005", "CD", "O"),
             ("Ford", "NNP", "O"), ("Focus", "NNP", "O")],
        )
        extract_vehicle_entities(text, entities)
        assert entities["vehicle_year"] == "2019"
        assert entities["vehicle_make"] == "Honda"
        assert entities["vehicle_model"] == "Civic"

    def test_existing_entries_kept(self, annotated, car_sentence) -> None:
        entities = EntityMap({"vehicle_make": "Mazda"})
        extract_vehicle_entities(annotated(car_sentence), entities)
        assert entities["vehicle_make"] == "Mazda"
        assert entities["vehicle_year"] == "2019"
