"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Persist the user's separator choice between invocations

Collaborators:
  - container.py: reads settings to wire stores and use cases
  - application.use_cases.select_separator: saves the chosen preset
  - domain.value_objects: separator presets

Constraints:
  - No business logic, pure configuration
  - Pure text components never read settings; callers pass values in

Notes:
  - Uses pydantic-settings for env parsing (prefix CARDIFY_)
  - Singleton via lru_cache
  - The separator selection lives in a small JSON file (SettingsStore) so
    the host can change it at runtime without touching the environment
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.value_objects import (
    DEFAULT_SEPARATOR_NAME,
    SEPARATOR_PRESETS,
    SeparatorConfig,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        vault_path: Root folder holding the documents (default: ".")
        settings_file: JSON file with the persisted separator choice
        separator_name: Separator preset used when nothing is persisted
        anchor_length: Characters per generated anchor (default: 10)
        unique_anchors: Resample generated anchors that collide within a run
        artifact_extension: Extension of generated card files (default: ".md")
        max_parallel_writes: Worker threads for artifact creation (default: 8)
        log_level: Level for the cardify logger (default: INFO)
    """

    vault_path: Path = Path(".")
    settings_file: Path = Path(".cardify.json")

    # Segmentation
    separator_name: str = DEFAULT_SEPARATOR_NAME

    # Anchors
    anchor_length: int = 10
    unique_anchors: bool = False  # R: off by default, tokens are independent

    # Artifacts
    artifact_extension: str = ".md"
    max_parallel_writes: int = 8

    # Observability
    log_level: str = "INFO"

    @field_validator("separator_name")
    @classmethod
    def separator_name_must_be_known(cls, v: str) -> str:
        if v not in SEPARATOR_PRESETS:
            raise ValueError(f"separator_name must be one of {sorted(SEPARATOR_PRESETS)}")
        return v

    @field_validator("anchor_length")
    @classmethod
    def anchor_length_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("anchor_length must be greater than 0")
        return v

    @field_validator("max_parallel_writes")
    @classmethod
    def max_parallel_writes_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_parallel_writes must be greater than 0")
        return v

    @field_validator("artifact_extension")
    @classmethod
    def artifact_extension_must_start_with_dot(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("artifact_extension must look like '.md'")
        return v

    def settings_file_path(self) -> Path:
        """Resolve settings_file against the vault when it is relative."""
        if self.settings_file.is_absolute():
            return self.settings_file
        return self.vault_path / self.settings_file

    model_config = SettingsConfigDict(
        env_prefix="CARDIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


class PersistedSettings(BaseModel):
    """
    R: On-disk shape of the user-selectable settings.

    The pattern is always re-derived from the name on load, so an edited
    or stale pattern in the file can never desync from its preset.
    """

    separator_name: str = DEFAULT_SEPARATOR_NAME
    separator: str = SEPARATOR_PRESETS[DEFAULT_SEPARATOR_NAME]

    @model_validator(mode="after")
    def sync_pattern_with_name(self):
        if self.separator_name not in SEPARATOR_PRESETS:
            raise ValueError(f"Unknown separator preset {self.separator_name!r}")
        self.separator = SEPARATOR_PRESETS[self.separator_name]
        return self

    def to_separator_config(self) -> SeparatorConfig:
        return SeparatorConfig.from_name(self.separator_name)

    @classmethod
    def from_separator_config(cls, config: SeparatorConfig) -> "PersistedSettings":
        return cls(separator_name=config.name, separator=config.pattern)


class SettingsStore:
    """
    R: Load/save the user's separator choice as a JSON file.

    Missing or unreadable files fall back to defaults (saved values are
    merged over the defaults, unknown keys ignored).
    """

    def __init__(self, path: Path, default_name: str = DEFAULT_SEPARATOR_NAME):
        self.path = Path(path)
        self.default_name = default_name

    def load(self) -> SeparatorConfig:
        defaults = {"separator_name": self.default_name}
        if not self.path.exists():
            return PersistedSettings(**defaults).to_separator_config()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("settings file must contain a JSON object")
            merged = {**defaults, **{k: v for k, v in raw.items() if k in PersistedSettings.model_fields}}
            return PersistedSettings(**merged).to_separator_config()
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning(
                "Settings file unreadable, using defaults",
                extra={"settings_file": str(self.path), "error": str(exc)},
            )
            return PersistedSettings(**defaults).to_separator_config()

    def save(self, config: SeparatorConfig) -> None:
        persisted = PersistedSettings.from_separator_config(config)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(persisted.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Settings saved", extra={"separator_name": config.name})


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
