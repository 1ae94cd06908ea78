"""
Name: Card Helper Use Cases Unit Tests

Responsibilities:
  - Test the live block counter
  - Test the insert-anchor command
  - Test separator preset selection and persistence

Collaborators:
  - cardify.application.use_cases: Use cases being tested
  - cardify.config.SettingsStore (real, on tmp_path)
"""

import re
from unittest.mock import Mock

import pytest

from cardify.application.use_cases import (
    CountBlocksUseCase,
    ExportErrorCode,
    InsertAnchorUseCase,
    SelectSeparatorInput,
    SelectSeparatorUseCase,
)
from cardify.config import SettingsStore


pytestmark = pytest.mark.unit


class TestCountBlocksUseCase:
    """Test suite for CountBlocksUseCase."""

    def test_counts_cards(self, empty_line_separator):
        result = CountBlocksUseCase(empty_line_separator).execute("A\n\nB\n\n\nC")

        assert result.count == 3
        assert result.label == "3 cards"

    def test_singular_label(self, empty_line_separator):
        assert CountBlocksUseCase(empty_line_separator).execute("A").label == "1 card"

    def test_uses_configured_separator(self, rule_separator):
        result = CountBlocksUseCase(rule_separator).execute("A\n\nB\n---\nC")

        assert result.count == 2

    def test_empty_document(self, empty_line_separator):
        result = CountBlocksUseCase(empty_line_separator).execute("---\na: b\n---\n")

        assert result.count == 0
        assert result.label == "0 cards"


class TestInsertAnchorUseCase:
    """Test suite for InsertAnchorUseCase."""

    def test_marker_has_sigil_and_token(self):
        result = InsertAnchorUseCase().execute()

        assert re.fullmatch(r"[0-9a-z]{10}", result.token)
        assert result.marker == "^" + result.token

    def test_uses_generator_and_length(self):
        generate = Mock(return_value="abc")

        result = InsertAnchorUseCase(anchor_length=3, generate=generate).execute()

        generate.assert_called_once_with(3)
        assert result.marker == "^abc"

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            InsertAnchorUseCase(anchor_length=0)


class TestSelectSeparatorUseCase:
    """Test suite for SelectSeparatorUseCase."""

    def test_select_and_persist(self, tmp_path):
        store = SettingsStore(tmp_path / "cardify.json")
        use_case = SelectSeparatorUseCase(store)

        result = use_case.execute(SelectSeparatorInput(name="---"))

        assert result.error is None
        assert result.separator.name == "---"
        assert result.separator.pattern == r"\n+---\s*(?:\n+|\n*?)"
        assert use_case.current() == result.separator

    def test_unknown_preset_is_rejected(self, tmp_path):
        path = tmp_path / "cardify.json"
        use_case = SelectSeparatorUseCase(SettingsStore(path))

        result = use_case.execute(SelectSeparatorInput(name="semicolon"))

        assert result.separator is None
        assert result.error.code == ExportErrorCode.VALIDATION_ERROR
        assert not path.exists()

    def test_save_failure_is_reported(self, tmp_path):
        store = Mock(spec=SettingsStore)
        store.path = tmp_path / "cardify.json"
        store.save.side_effect = PermissionError(13, "Permission denied")

        result = SelectSeparatorUseCase(store).execute(SelectSeparatorInput(name="---"))

        assert result.error.code == ExportErrorCode.IO_ERROR
        assert "Permission denied" in result.error.message

    def test_available_presets(self):
        assert SelectSeparatorUseCase.available_presets() == ["empty line", "---"]
