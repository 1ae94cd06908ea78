"""Text utilities (document splitting, block segmentation, anchors)."""

from .anchors import add_missing_anchors, generate_anchor, reconcile
from .artifacts import (
    artifact_filename,
    artifact_folder,
    artifact_path,
    build_linked_block,
    sanitize_filename,
    title_segment,
)
from .document_splitter import split_document
from .segmenter import (
    compile_separator,
    count_blocks,
    ensure_consistent,
    extract_anchor,
    extract_comment,
    non_empty_blocks,
    segment,
)

__all__ = [
    "split_document",
    "segment",
    "compile_separator",
    "ensure_consistent",
    "non_empty_blocks",
    "extract_comment",
    "extract_anchor",
    "count_blocks",
    "generate_anchor",
    "reconcile",
    "add_missing_anchors",
    "build_linked_block",
    "artifact_filename",
    "artifact_folder",
    "artifact_path",
    "sanitize_filename",
    "title_segment",
]
