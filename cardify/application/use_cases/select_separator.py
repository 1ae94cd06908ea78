"""
Name: Select Separator Use Case

Responsibilities:
  - Switch the active separator preset by its human-readable name
  - Persist the choice so later invocations pick it up

Collaborators:
  - config.SettingsStore: JSON persistence
  - domain.value_objects.SeparatorConfig: keeps name and pattern in sync

Constraints:
  - Unknown preset names are rejected and nothing is saved
"""

import logging
from dataclasses import dataclass

from ...config import SettingsStore
from ...domain.value_objects import SEPARATOR_PRESETS, SeparatorConfig
from ...exceptions import CollaboratorIOError, UserInputError
from .results import ExportError, ExportErrorCode

logger = logging.getLogger(__name__)


@dataclass
class SelectSeparatorInput:
    name: str


@dataclass
class SelectSeparatorOutput:
    separator: SeparatorConfig | None = None
    error: ExportError | None = None


class SelectSeparatorUseCase:
    """R: Settings-tab dropdown behavior."""

    def __init__(self, settings_store: SettingsStore):
        self.settings_store = settings_store

    @staticmethod
    def available_presets() -> list[str]:
        return list(SEPARATOR_PRESETS)

    def current(self) -> SeparatorConfig:
        return self.settings_store.load()

    def execute(self, input_data: SelectSeparatorInput) -> SelectSeparatorOutput:
        try:
            separator = SeparatorConfig.from_name(input_data.name)
        except ValueError as exc:
            error = UserInputError(str(exc))
            return SelectSeparatorOutput(
                error=ExportError.from_exception(error, ExportErrorCode.VALIDATION_ERROR)
            )

        try:
            self.settings_store.save(separator)
        except OSError as exc:
            error = CollaboratorIOError(
                f"Cannot save settings: {exc.strerror or exc}",
                resource=str(self.settings_store.path),
            )
            logger.warning("Settings not saved", extra={"error_id": error.error_id})
            return SelectSeparatorOutput(error=ExportError.from_exception(error))

        return SelectSeparatorOutput(separator=separator)
