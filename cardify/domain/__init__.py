"""Domain layer exports"""

from .entities import Block, Document, LinkedBlock, SegmentedBody
from .services import DocumentStore, Notifier
from .value_objects import (
    ANCHOR_SIGIL,
    SEPARATOR_PRESETS,
    SeparatorConfig,
    anchor_marker,
    embed_link,
)

__all__ = [
    "Block",
    "Document",
    "LinkedBlock",
    "SegmentedBody",
    "DocumentStore",
    "Notifier",
    "ANCHOR_SIGIL",
    "SEPARATOR_PRESETS",
    "SeparatorConfig",
    "anchor_marker",
    "embed_link",
]
