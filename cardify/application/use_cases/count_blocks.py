"""
Name: Count Blocks Use Case

Responsibilities:
  - Count the non-empty blocks (cards) of a document being edited
  - Produce the short label shown on the host status surface
"""

from dataclasses import dataclass

from ...domain.value_objects import SeparatorConfig
from ...infrastructure.text import count_blocks


@dataclass
class CountBlocksOutput:
    count: int
    label: str


def format_card_count(count: int) -> str:
    return f"{count} card" if count == 1 else f"{count} cards"


class CountBlocksUseCase:
    """R: Live card counter; pure, safe to call on every edit."""

    def __init__(self, separator: SeparatorConfig):
        self.separator = separator

    def execute(self, text: str) -> CountBlocksOutput:
        count = count_blocks(text, self.separator.pattern)
        return CountBlocksOutput(count=count, label=format_card_count(count))
