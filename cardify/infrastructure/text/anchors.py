"""
Name: Anchor Reconciler

Responsibilities:
  - Guarantee that every non-empty block carries an anchor marker
  - Keep existing anchors untouched (stable across re-runs)
  - Reassemble the body with the exact separators originally matched

Collaborators:
  - segmenter: segment, extract_anchor, ensure_consistent
  - domain.value_objects.anchor_marker

Constraints:
  - Empty (whitespace-only) blocks never receive an anchor
  - Output of reconcile is a fixed point: running it again is a no-op
  - Tokens are generated independently per block unless unique=True

Notes:
  - Alphabet is [0-9a-z], the same characters as a base-36 digit
  - unique=True seeds the used set with the anchors already present, then
    resamples any generated token already seen in this call
"""

import secrets
import string
from typing import Callable, List, Optional, Sequence, Set

from ...domain.entities import Block
from ...domain.value_objects import anchor_marker
from ...exceptions import SegmentationConsistencyError
from .segmenter import ensure_consistent, extract_anchor, segment

ANCHOR_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_ANCHOR_LENGTH = 10

# R: Upper bound on resampling attempts when unique=True
_MAX_RESAMPLES = 100

AnchorGenerator = Callable[[int], str]


def generate_anchor(length: int = DEFAULT_ANCHOR_LENGTH) -> str:
    """
    R: Generate a random anchor token.

    Args:
        length: Number of characters (must be > 0)

    Returns:
        Token drawn from ANCHOR_ALPHABET
    """
    if length <= 0:
        raise ValueError(f"length must be > 0, got {length}")
    return "".join(secrets.choice(ANCHOR_ALPHABET) for _ in range(length))


def _block_text(block) -> str:
    return block.text if isinstance(block, Block) else block


def _with_anchor(text: str, token: str) -> str:
    prefix = "" if text.endswith("\n") else "\n"
    return text + prefix + anchor_marker(token)


def reconcile(
    blocks: Sequence,
    separators: Sequence[str],
    *,
    anchor_length: int = DEFAULT_ANCHOR_LENGTH,
    unique: bool = False,
    generate: Optional[AnchorGenerator] = None,
) -> str:
    """
    R: Add missing anchors and rejoin blocks with their separators.

    Args:
        blocks: Ordered blocks (Block or raw str), empty ones included
        separators: Literal separator text between consecutive blocks
        anchor_length: Length of generated tokens
        unique: Resample tokens already used in this call
        generate: Token generator (defaults to generate_anchor)

    Returns:
        Reassembled body text

    Raises:
        SegmentationConsistencyError: If separators don't fit the blocks, or
            unique mode runs out of resampling attempts
    """
    ensure_consistent(blocks, separators)
    generate = generate or generate_anchor

    texts = [_block_text(block) for block in blocks]
    used: Set[str] = set()
    if unique:
        used = {token for token in map(extract_anchor, texts) if token}

    def fresh_token() -> str:
        token = generate(anchor_length)
        if not unique:
            return token
        attempts = 0
        while token in used:
            attempts += 1
            if attempts > _MAX_RESAMPLES:
                raise SegmentationConsistencyError(
                    f"Could not generate a unique anchor token after {_MAX_RESAMPLES} attempts"
                )
            token = generate(anchor_length)
        used.add(token)
        return token

    parts: List[str] = []
    for idx, text in enumerate(texts):
        if text.strip() and extract_anchor(text) is None:
            text = _with_anchor(text, fresh_token())
        parts.append(text)
        if idx < len(separators):
            parts.append(separators[idx])

    return "".join(parts)


def add_missing_anchors(
    body: str,
    pattern: str,
    *,
    anchor_length: int = DEFAULT_ANCHOR_LENGTH,
    unique: bool = False,
    generate: Optional[AnchorGenerator] = None,
) -> str:
    """R: Segment body on pattern, then reconcile anchors."""
    segmented = segment(body, pattern)
    return reconcile(
        segmented.blocks,
        segmented.separators,
        anchor_length=anchor_length,
        unique=unique,
        generate=generate,
    )
