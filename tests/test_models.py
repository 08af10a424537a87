"""Tests for the data models and their wire shape."""

import pytest
from pydantic import ValidationError

from src.puzzle import GenerationOptions, LetterCell, Position, Word


class TestWireShape:
    """Test camelCase serialization."""

    def test_payload_keys(self, valid_puzzle):
        """The payload uses camelCase keys throughout."""
        payload = valid_puzzle.to_payload()

        cell = payload["grid"][0][0]
        assert cell == {
            "letter": "C",
            "position": {"x": 0, "y": 0},
            "isPartOfWord": True,
            "wordId": valid_puzzle.target_words[0].id,
            "isCollected": False,
        }

        word = payload["targetWords"][0]
        assert word["text"] == "CAT"
        assert word["isTarget"] is True
        assert word["collectionProgress"] == 0
        assert word["positions"][1] == {"x": 1, "y": 0}

        assert payload["theme"]["targetWords"] == []
        assert set(payload["generationStats"]) == {"attempts", "placedWords", "failedPlacements", "fillLetters"}

    def test_filler_cell_omits_word_id(self, valid_puzzle):
        """Cells outside words carry no wordId."""
        cell = valid_puzzle.to_payload()["grid"][1][1]
        assert "wordId" not in cell
        assert cell["isPartOfWord"] is False

    def test_accepts_camel_case_input(self):
        """Models accept camelCase keys on input."""
        word = Word.model_validate({"id": "w", "text": "CAT", "isTarget": True, "collectionProgress": 1})
        assert word.is_target is True
        assert word.collection_progress == 1

        options = GenerationOptions.model_validate({"gridSize": 8, "targetWordCount": 4})
        assert options.grid_size == 8
        assert options.target_word_count == 4


class TestModelRules:
    """Test field constraints."""

    def test_defaults(self):
        """Options default to a 6x6 medium puzzle with 3 targets and 2 distractors."""
        options = GenerationOptions()
        assert options.grid_size == 6
        assert options.target_word_count == 3
        assert options.distractor_word_count == 2
        assert options.difficulty == "medium"
        assert options.max_attempts == 100
        assert options.allow_word_overlaps is False

    @pytest.mark.parametrize("field, value", [
        ("grid_size", 2),
        ("target_word_count", -1),
        ("max_attempts", -5),
        ("difficulty", "expert"),
    ])
    def test_rejects_bad_options(self, field, value):
        """Out-of-range options are rejected."""
        with pytest.raises(ValidationError):
            GenerationOptions(**{field: value})

    def test_empty_word_text_rejected(self):
        """A word needs at least one letter."""
        with pytest.raises(ValidationError):
            Word(id="w", text="", is_target=True)

    def test_positions_are_hashable(self):
        """Equal positions collapse in a set."""
        assert len({Position(x=1, y=2), Position(x=1, y=2), Position(x=2, y=1)}) == 2

    def test_cell_defaults(self):
        """A new cell is empty and unowned."""
        cell = LetterCell(position=Position(x=0, y=0))
        assert cell.letter == ""
        assert cell.word_id is None
        assert cell.is_part_of_word is False
