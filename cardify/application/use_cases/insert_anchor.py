"""
Name: Insert Anchor Use Case

Responsibilities:
  - Produce a fresh `^<token>` marker for the editor to insert at the cursor
"""

from dataclasses import dataclass

from ...domain.value_objects import anchor_marker
from ...infrastructure.text import generate_anchor


@dataclass
class InsertAnchorOutput:
    token: str
    marker: str


class InsertAnchorUseCase:
    def __init__(self, anchor_length: int = 10, generate=generate_anchor):
        if anchor_length <= 0:
            raise ValueError(f"anchor_length must be > 0, got {anchor_length}")
        self.anchor_length = anchor_length
        self.generate = generate

    def execute(self) -> InsertAnchorOutput:
        token = self.generate(self.anchor_length)
        return InsertAnchorOutput(token=token, marker=anchor_marker(token))
