"""
Name: Local Vault Document Store

Responsibilities:
  - Implement DocumentStore against a folder on the local filesystem
  - Map OSError to CollaboratorIOError with the offending path
  - Create artifact files exclusively (never overwrite)

Collaborators:
  - domain.services.DocumentStore (contract implemented)
  - exceptions.CollaboratorIOError

Constraints:
  - Paths are vault-relative and "/"-separated; they may not escape the root
  - Text is read/written as UTF-8 without newline translation, so the
    document round-trips byte for byte

Notes:
  - create_file uses mode "x": the existence check and the creation are one
    atomic step, a concurrent duplicate surfaces as FileExistsError
"""

import logging
from pathlib import Path

from ...exceptions import CollaboratorIOError

logger = logging.getLogger(__name__)


class LocalVaultStore:
    """R: DocumentStore backed by a directory tree."""

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        full = (self.root / path).resolve()
        if full != self.root and self.root not in full.parents:
            raise CollaboratorIOError(f"Path escapes the vault: {path}", resource=path)
        return full

    def read_document(self, path: str) -> str:
        full = self._resolve(path)
        try:
            with open(full, "r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except OSError as exc:
            raise CollaboratorIOError(
                f"Cannot read {path}: {exc.strerror or exc}", resource=path
            ) from exc

    def write_document(self, path: str, text: str) -> None:
        full = self._resolve(path)
        try:
            with open(full, "w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise CollaboratorIOError(
                f"Cannot write {path}: {exc.strerror or exc}", resource=path
            ) from exc

    def file_exists(self, path: str) -> bool:
        full = self._resolve(path)
        try:
            return full.exists()
        except OSError as exc:
            raise CollaboratorIOError(
                f"Cannot check {path}: {exc.strerror or exc}", resource=path
            ) from exc

    def create_file(self, path: str, content: str) -> None:
        full = self._resolve(path)
        try:
            with open(full, "x", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except FileExistsError:
            raise
        except OSError as exc:
            raise CollaboratorIOError(
                f"Cannot create {path}: {exc.strerror or exc}", resource=path
            ) from exc
        logger.debug("Artifact created", extra={"path": path})

    def create_folder(self, path: str) -> None:
        full = self._resolve(path)
        try:
            full.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CollaboratorIOError(
                f"Cannot create folder {path}: {exc.strerror or exc}", resource=path
            ) from exc
