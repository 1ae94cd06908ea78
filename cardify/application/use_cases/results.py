"""
Name: Use Case Results

Responsibilities:
  - Provide consistent error/result types for the card use cases
"""

from dataclasses import dataclass
from enum import Enum

from ...exceptions import (
    CardifyError,
    CollaboratorIOError,
    UserInputError,
)


class ExportErrorCode(str, Enum):
    """R: Error codes for card use cases."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    IO_ERROR = "IO_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ExportError:
    code: ExportErrorCode
    message: str
    resource: str | None = None
    error_id: str | None = None

    @classmethod
    def from_exception(
        cls, exc: CardifyError, code: ExportErrorCode | None = None
    ) -> "ExportError":
        if code is None:
            if isinstance(exc, UserInputError):
                code = ExportErrorCode.VALIDATION_ERROR
            elif isinstance(exc, CollaboratorIOError):
                code = ExportErrorCode.IO_ERROR
            else:
                code = ExportErrorCode.INTERNAL_ERROR
        return cls(
            code=code,
            message=exc.message,
            resource=getattr(exc, "resource", None),
            error_id=exc.error_id,
        )
