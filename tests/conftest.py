"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Provide in-memory collaborators (document store, notifier)
  - Provide deterministic anchor generators

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - cardify.domain: Entities and protocols

Notes:
  - Fixtures are auto-discovered by pytest
  - Settings never read a local .env during tests
"""

import sys
from pathlib import Path
from typing import Callable, Iterable
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from cardify import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from cardify.domain.services import Notifier  # noqa: E402
from cardify.domain.value_objects import SeparatorConfig  # noqa: E402
from cardify.infrastructure.storage import InMemoryDocumentStore  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Separator Fixtures
# ============================================================================


@pytest.fixture
def empty_line_separator() -> SeparatorConfig:
    """R: Default "empty line" preset."""
    return SeparatorConfig.from_name("empty line")


@pytest.fixture
def rule_separator() -> SeparatorConfig:
    """R: Horizontal rule ("---") preset."""
    return SeparatorConfig.from_name("---")


# ============================================================================
# Anchor Fixtures
# ============================================================================


def _sequence_generator(tokens: Iterable[str]) -> Callable[[int], str]:
    iterator = iter(tokens)
    return lambda length: next(iterator)


@pytest.fixture
def make_generator():
    """R: Factory for anchor generators returning given tokens in order."""
    return _sequence_generator


@pytest.fixture
def fixed_tokens() -> Callable[[int], str]:
    """R: Deterministic generator: t0, t1, t2, ..."""
    return _sequence_generator(f"t{i}" for i in range(1000))


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    """R: Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def mock_notifier() -> Mock:
    """R: Notifier recording every notice."""
    return Mock(spec=Notifier)


@pytest.fixture
def clean_settings(monkeypatch):
    """R: Strip CARDIFY_* env vars and reset cached settings/container."""
    import os

    for key in list(os.environ):
        if key.startswith("CARDIFY_"):
            monkeypatch.delenv(key, raising=False)

    from cardify import container

    def clear() -> None:
        app_config.get_settings.cache_clear()
        container.get_document_store.cache_clear()
        container.get_notifier.cache_clear()
        container.get_settings_store.cache_clear()

    clear()
    yield
    clear()
