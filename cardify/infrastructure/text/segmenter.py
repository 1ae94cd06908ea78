"""
Name: Block Segmenter

Responsibilities:
  - Split a document body into ordered blocks on a separator pattern
  - Keep the literal separator text so it can be reinserted verbatim
  - Extract per-block metadata (comment label, anchor token)
  - Count non-empty blocks for the live card counter

Collaborators:
  - domain.entities: Block, SegmentedBody
  - domain.value_objects: marker grammar
  - document_splitter.split_document (for count_blocks)

Constraints:
  - k separator matches always yield k + 1 blocks (empty ones included)
  - Empty blocks are filtered in a separate pass, never during the split
  - Comment/anchor extraction is a line parser, first match wins

Algorithm:
  - Walk re.finditer over the body; each match closes the current block
    and records match.group(0) as the separator at that boundary
  - Zero-width matches are ignored (they cannot be reinserted)
"""

import re
from functools import lru_cache
from typing import List, Optional, Sequence

from ...domain.entities import Block, SegmentedBody
from ...domain.value_objects import ANCHOR_SIGIL, COMMENT_MARKER, QUOTE_PREFIX
from ...exceptions import SegmentationConsistencyError, UserInputError
from .document_splitter import split_document


@lru_cache(maxsize=32)
def compile_separator(pattern: str) -> re.Pattern:
    """
    R: Compile a separator pattern, rejecting unusable ones.

    Raises:
        UserInputError: If the pattern is not a valid regex or matches ""
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise UserInputError(f"Invalid separator pattern {pattern!r}: {exc}") from exc

    if regex.fullmatch(""):
        raise UserInputError(f"Separator pattern {pattern!r} matches empty text")

    return regex


def segment(body: str, pattern: str) -> SegmentedBody:
    """
    R: Split body into blocks, keeping the matched separator texts.

    Args:
        body: Document body (header already removed)
        pattern: Separator regex (e.g. r"\\n{2,}")

    Returns:
        SegmentedBody with len(separators) == len(blocks) - 1
    """
    regex = compile_separator(pattern)

    texts: List[str] = []
    separators: List[str] = []
    cursor = 0

    for match in regex.finditer(body):
        if match.end() == match.start():
            continue
        texts.append(body[cursor:match.start()])
        separators.append(match.group(0))
        cursor = match.end()

    texts.append(body[cursor:])

    blocks = [Block(index=idx, text=text) for idx, text in enumerate(texts)]
    return SegmentedBody(blocks=blocks, separators=separators)


def ensure_consistent(blocks: Sequence, separators: Sequence[str]) -> None:
    """
    R: Check that separators line up with the block boundaries.

    Raises:
        SegmentationConsistencyError: If len(separators) != len(blocks) - 1
    """
    expected = max(len(blocks) - 1, 0)
    if len(separators) != expected:
        raise SegmentationConsistencyError(
            f"Separator/block mismatch: {len(separators)} separators for "
            f"{len(blocks)} blocks (expected {expected})"
        )


def non_empty_blocks(segmented: SegmentedBody) -> List[Block]:
    """R: Second pass: drop whitespace-only blocks, keeping order and indices."""
    return segmented.non_empty()


def extract_comment(text: str) -> str:
    """
    R: Return the label of a `> %%COMMENT%%` / `> <text>` pair.

    Returns:
        The label text, or "" when no marker pair is present
    """
    lines = text.split("\n")
    for current, following in zip(lines, lines[1:]):
        stripped = current.strip()
        if not stripped.startswith(QUOTE_PREFIX):
            continue
        if stripped[len(QUOTE_PREFIX):].strip() != COMMENT_MARKER:
            continue

        label_line = following.lstrip()
        if label_line.startswith(QUOTE_PREFIX):
            return label_line[len(QUOTE_PREFIX):].strip()

    return ""


def extract_anchor(text: str) -> Optional[str]:
    """
    R: Return the token of the first `^<token>` line, or None.

    A marker line starts with the sigil and holds a single non-empty token.
    """
    for line in text.split("\n"):
        if not line.startswith(ANCHOR_SIGIL):
            continue
        token = line[len(ANCHOR_SIGIL):].rstrip()
        if token and not any(ch.isspace() for ch in token):
            return token
    return None


def count_blocks(raw_text: str, pattern: str) -> int:
    """
    R: Number of non-empty blocks in a document (header excluded).

    Used by the live card counter while the document is edited.
    """
    document = split_document(raw_text)
    return len(non_empty_blocks(segment(document.body, pattern)))
