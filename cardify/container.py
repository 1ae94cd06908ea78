"""
Name: Dependency Injection Container

Responsibilities:
  - Wire settings, document store, notifier and use cases
  - Provide factory functions for the host integration

Collaborators:
  - config: Settings, SettingsStore
  - infrastructure.storage: LocalVaultStore
  - infrastructure.notifications: LoggingNotifier
  - application.use_cases: card use cases

Constraints:
  - Manual DI (no library)
  - Singletons via functools.lru_cache; the separator is re-read from the
    settings file on every call so a changed preset applies immediately

Notes:
  - This is the composition root (where dependencies are wired)
  - Tests build use cases directly with in-memory collaborators
"""

from functools import lru_cache

from .config import SettingsStore, get_settings
from .domain.services import DocumentStore, Notifier
from .domain.value_objects import SeparatorConfig
from .infrastructure.notifications import LoggingNotifier
from .infrastructure.storage import LocalVaultStore
from .logger import setup_logger
from .application.use_cases import (
    CountBlocksUseCase,
    ExportCardsUseCase,
    InsertAnchorUseCase,
    SelectSeparatorUseCase,
)


@lru_cache
def get_document_store() -> DocumentStore:
    """R: Filesystem store rooted at the configured vault."""
    return LocalVaultStore(get_settings().vault_path)


@lru_cache
def get_notifier() -> Notifier:
    settings = get_settings()
    return LoggingNotifier(setup_logger("cardify", settings.log_level).getChild("notices"))


@lru_cache
def get_settings_store() -> SettingsStore:
    settings = get_settings()
    return SettingsStore(settings.settings_file_path(), default_name=settings.separator_name)


def get_active_separator() -> SeparatorConfig:
    return get_settings_store().load()


def get_export_cards_use_case() -> ExportCardsUseCase:
    settings = get_settings()
    return ExportCardsUseCase(
        store=get_document_store(),
        notifier=get_notifier(),
        anchor_length=settings.anchor_length,
        unique_anchors=settings.unique_anchors,
        artifact_extension=settings.artifact_extension,
        max_parallel_writes=settings.max_parallel_writes,
    )


def get_count_blocks_use_case() -> CountBlocksUseCase:
    return CountBlocksUseCase(separator=get_active_separator())


def get_insert_anchor_use_case() -> InsertAnchorUseCase:
    return InsertAnchorUseCase(anchor_length=get_settings().anchor_length)


def get_select_separator_use_case() -> SelectSeparatorUseCase:
    return SelectSeparatorUseCase(settings_store=get_settings_store())
