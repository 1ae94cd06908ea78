"""
Name: Domain Entities

Responsibilities:
  - Define core entities of the card export (Document, Block, LinkedBlock)
  - Encapsulate the segmented view of a document body

Collaborators:
  - None (pure domain layer, no external dependencies)

Constraints:
  - No dependencies on infrastructure or frameworks
  - Block order is significant (position drives filenames and separators)

Notes:
  - Empty blocks are kept in SegmentedBody for index alignment with the
    separators; they are filtered out before artifacts are built
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Document:
    """
    R: A markdown document split into its metadata header and body.

    Attributes:
        header: Leading `---` fence block, verbatim ("" when absent)
        body: Remainder of the text
    """

    header: str
    body: str

    @property
    def text(self) -> str:
        return self.header + self.body


@dataclass(frozen=True)
class Block:
    """
    R: Text span between two separator matches.

    Attributes:
        index: Position of the block in the body (0-based, empty blocks included)
        text: Raw text of the block
    """

    index: int
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass
class SegmentedBody:
    """
    R: Ordered blocks plus the literal separator text matched between them.

    separators[i] sits between blocks[i] and blocks[i + 1].
    """

    blocks: List[Block] = field(default_factory=list)
    separators: List[str] = field(default_factory=list)

    def non_empty(self) -> List[Block]:
        return [block for block in self.blocks if not block.is_empty]


@dataclass(frozen=True)
class LinkedBlock:
    """
    R: What one artifact file is made of.

    Attributes:
        title: Comment label of the block ("" when absent)
        link: Embed reference to the block in its source document
    """

    title: str
    link: str
