"""
Name: Artifact Name & Link Builder

Responsibilities:
  - Turn an anchored block into a LinkedBlock (title + embed link)
  - Derive the artifact filename from position and comment label
  - Sanitize and normalize artifact paths

Collaborators:
  - segmenter: extract_comment, extract_anchor
  - domain.value_objects.embed_link

Constraints:
  - Runs only after reconciliation: a block without anchor is a defect
  - Sanitized output only contains ASCII letters, digits, "_", ".", "-",
    whitespace and "/"; sanitizing twice changes nothing
  - A title never adds path segments: its "/" become "-", so every
    artifact sits directly in its folder under a "<position>-" name
"""

import re

from ...domain.entities import Block, LinkedBlock
from ...domain.value_objects import embed_link
from ...exceptions import SegmentationConsistencyError
from .segmenter import extract_anchor, extract_comment

_UNSUITABLE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.\-\s/]")
_REPEATED_SLASH_RE = re.compile(r"/{2,}")
_NON_BREAKING_SPACES_RE = re.compile("[\u00a0\u202f]")


def build_linked_block(block: Block, source_base_name: str) -> LinkedBlock:
    """
    R: Build the title/link pair for an anchored block.

    Raises:
        SegmentationConsistencyError: If the block carries no anchor
    """
    token = extract_anchor(block.text)
    if token is None:
        raise SegmentationConsistencyError(
            f"Block {block.index} has no anchor after reconciliation"
        )
    return LinkedBlock(
        title=extract_comment(block.text),
        link=embed_link(source_base_name, token),
    )


def artifact_filename(position: int, title: str) -> str:
    """R: "<position>" or "<position>-<title>" (no extension)."""
    return str(position) if title == "" else f"{position}-{title}"


def sanitize_filename(value: str) -> str:
    """R: Strip every character outside the permitted set."""
    return _UNSUITABLE_CHARS_RE.sub("", value)


def normalize_path(path: str) -> str:
    """R: Collapse repeated slashes, trim edge slashes, plain spaces only."""
    path = _NON_BREAKING_SPACES_RE.sub(" ", path)
    path = _REPEATED_SLASH_RE.sub("/", path)
    return path.strip("/")


def artifact_folder(document_dir: str, document_base_name: str) -> str:
    """R: Sanitized folder that holds the artifacts of one document."""
    raw = f"{document_dir}/{document_base_name}" if document_dir else document_base_name
    return normalize_path(sanitize_filename(raw))


def title_segment(title: str) -> str:
    """R: Sanitized title safe to use inside a single filename."""
    return sanitize_filename(title).replace("/", "-")


def artifact_path(
    folder: str,
    position: int,
    title: str,
    extension: str = ".md",
) -> str:
    """R: Sanitized, normalized vault path of one artifact file."""
    filename = artifact_filename(position, title_segment(title))
    return normalize_path(sanitize_filename(f"{folder}/{filename}{extension}"))
