"""
Name: Domain Service Interfaces

Responsibilities:
  - Define contracts for the host collaborators (document store, notices)
  - Provide abstraction over the storage backend (vault on disk, memory)
  - Enable dependency inversion (use cases don't depend on the filesystem)

Collaborators:
  - Implementations in infrastructure.storage and infrastructure.notifications

Constraints:
  - Pure interfaces (Protocol), no implementation
  - Paths are vault-relative, "/"-separated strings

Notes:
  - Using typing.Protocol for structural subtyping
  - Enables testing with mock collaborators
"""

from typing import Protocol


class DocumentStore(Protocol):
    """
    R: Interface for reading/writing documents and creating artifact files.

    Implementations must:
      - Raise CollaboratorIOError on backend failures (with the path)
      - Raise FileExistsError from create_file when the path already exists
    """

    def read_document(self, path: str) -> str:
        """
        R: Read the full text of a document.

        Args:
            path: Vault-relative document path

        Returns:
            Document text
        """
        ...

    def write_document(self, path: str, text: str) -> None:
        """R: Overwrite the full text of a document."""
        ...

    def file_exists(self, path: str) -> bool:
        """R: True if a file or folder exists at path."""
        ...

    def create_file(self, path: str, content: str) -> None:
        """
        R: Create a new file with content; never overwrites.

        Raises:
            FileExistsError: If something already exists at path
        """
        ...

    def create_folder(self, path: str) -> None:
        """R: Create a folder (and parents) at path."""
        ...


class Notifier(Protocol):
    """R: Fire-and-forget, single-line status messages for the user."""

    def notify(self, message: str) -> None:
        ...
