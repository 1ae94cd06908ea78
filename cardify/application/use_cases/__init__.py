"""Application use cases"""

from .count_blocks import CountBlocksOutput, CountBlocksUseCase
from .export_cards import (
    ExportCardsInput,
    ExportCardsOutput,
    ExportCardsUseCase,
    ExportState,
)
from .insert_anchor import InsertAnchorOutput, InsertAnchorUseCase
from .results import ExportError, ExportErrorCode
from .select_separator import (
    SelectSeparatorInput,
    SelectSeparatorOutput,
    SelectSeparatorUseCase,
)

__all__ = [
    "CountBlocksUseCase",
    "CountBlocksOutput",
    "ExportCardsUseCase",
    "ExportCardsInput",
    "ExportCardsOutput",
    "ExportState",
    "InsertAnchorUseCase",
    "InsertAnchorOutput",
    "SelectSeparatorUseCase",
    "SelectSeparatorInput",
    "SelectSeparatorOutput",
    "ExportError",
    "ExportErrorCode",
]
