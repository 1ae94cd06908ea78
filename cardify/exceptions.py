"""
Name: Custom Exceptions and Error Handling

Responsibilities:
  - Define the error taxonomy of the card export flow
  - Provide a stable error_code and a correlation error_id per failure
  - Give use cases a uniform way to turn failures into single-line notices

Collaborators:
  - infrastructure.text: raises UserInputError / SegmentationConsistencyError
  - infrastructure.storage: raises CollaboratorIOError
  - application.use_cases: catches and maps to ExportError results

Constraints:
  - Messages are single-line and human readable (shown to the user)
  - Never include document content in messages, only paths/ids

Notes:
  - error_id is a UUID for log correlation
  - A name collision on an artifact path is NOT an error (skip + notice)
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass
class ErrorResponse:
    """Structured error payload for the host surface."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class CardifyError(Exception):
    """Base exception for Cardify."""

    error_code: str = "CARDIFY_ERROR"

    def __init__(self, message: str, error_id: str | None = None):
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            error_id=self.error_id,
        )


class UserInputError(CardifyError):
    """Invalid input from the user (missing document, wrong type, bad separator)."""

    error_code: str = "USER_INPUT_ERROR"


class SegmentationConsistencyError(CardifyError):
    """Internal invariant violated: separators do not line up with blocks."""

    error_code: str = "SEGMENTATION_CONSISTENCY_ERROR"


class CollaboratorIOError(CardifyError):
    """Read/write/create/exists call against the document store failed."""

    error_code: str = "COLLABORATOR_IO_ERROR"

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        error_id: str | None = None,
    ):
        self.resource = resource
        super().__init__(message, error_id=error_id)
