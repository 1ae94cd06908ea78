"""
Name: In-Memory Document Store

Responsibilities:
  - Keep documents and artifact files in memory (tests / local dev)
  - Mirror LocalVaultStore semantics (exclusive create, folders)

Collaborators:
  - domain.services.DocumentStore (contract implemented)

Constraints:
  - Thread-safe: access guarded by a Lock (artifacts are created from a pool)
  - Paths are compared as given, no normalization
"""

from threading import Lock
from typing import Dict, Iterable, Optional, Set

from ...exceptions import CollaboratorIOError


class InMemoryDocumentStore:
    """R: Dict-backed DocumentStore."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self._lock = Lock()
        self._files: Dict[str, str] = dict(files or {})
        self._folders: Set[str] = set()

    def read_document(self, path: str) -> str:
        with self._lock:
            if path not in self._files:
                raise CollaboratorIOError(f"Cannot read {path}: not found", resource=path)
            return self._files[path]

    def write_document(self, path: str, text: str) -> None:
        with self._lock:
            self._files[path] = text

    def file_exists(self, path: str) -> bool:
        with self._lock:
            return path in self._files or path in self._folders

    def create_file(self, path: str, content: str) -> None:
        with self._lock:
            if path in self._files or path in self._folders:
                raise FileExistsError(path)
            self._files[path] = content

    def create_folder(self, path: str) -> None:
        with self._lock:
            self._folders.add(path)

    # R: Inspection helpers (not part of DocumentStore)
    def get(self, path: str) -> Optional[str]:
        with self._lock:
            return self._files.get(path)

    def paths(self) -> Iterable[str]:
        with self._lock:
            return sorted(self._files)

    @property
    def folders(self) -> Set[str]:
        with self._lock:
            return set(self._folders)
