"""
Name: Domain Value Objects Unit Tests

Responsibilities:
  - Test separator presets and SeparatorConfig sync
  - Test marker helpers and entity properties
"""

import pytest

from cardify.domain.entities import Block, Document, SegmentedBody
from cardify.domain.value_objects import (
    SEPARATOR_PRESETS,
    SeparatorConfig,
    anchor_marker,
    embed_link,
)


pytestmark = pytest.mark.unit


class TestSeparatorConfig:
    """Test suite for SeparatorConfig."""

    def test_default_is_empty_line(self):
        config = SeparatorConfig.default()

        assert config.name == "empty line"
        assert config.pattern == r"\n{2,}"

    def test_from_name_keeps_pattern_in_sync(self):
        for name, pattern in SEPARATOR_PRESETS.items():
            assert SeparatorConfig.from_name(name).pattern == pattern

    def test_unknown_name(self):
        with pytest.raises(ValueError) as exc_info:
            SeparatorConfig.from_name("tab")

        assert "Unknown separator preset" in str(exc_info.value)


class TestMarkers:
    """Test suite for marker helpers."""

    def test_anchor_marker(self):
        assert anchor_marker("abc123") == "^abc123"

    def test_embed_link(self):
        assert embed_link("Deck", "abc123") == "![[Deck#^abc123]]"


class TestEntities:
    """Test suite for domain entities."""

    def test_block_emptiness(self):
        assert Block(index=0, text=" \n\t").is_empty
        assert not Block(index=0, text=" x ").is_empty

    def test_document_text(self):
        assert Document(header="---\n---", body="\nA").text == "---\n---\nA"

    def test_segmented_body_non_empty(self):
        segmented = SegmentedBody(
            blocks=[Block(0, ""), Block(1, "A")], separators=["\n\n"]
        )

        assert segmented.non_empty() == [Block(1, "A")]
