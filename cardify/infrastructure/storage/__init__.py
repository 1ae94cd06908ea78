"""Infrastructure adapters: document stores."""

from .in_memory import InMemoryDocumentStore
from .local_vault import LocalVaultStore

__all__ = [
    "InMemoryDocumentStore",
    "LocalVaultStore",
]
