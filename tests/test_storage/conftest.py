"""Fixtures for persistence tests."""

from typing import Any

import pytest

from jaucp_scorer.config.settings import AppConfig
from jaucp_scorer.storage.backend import KeyValueStore, StoreRegistry
from jaucp_scorer.storage.history import HistoryStore
from jaucp_scorer.storage.settings_store import SettingsStore


class BrokenStore(KeyValueStore):
    """Store whose every operation fails, like a revoked disk or quota error."""

    async def get(self, key: str) -> Any | None:
        raise OSError("store unavailable")

    async def set(self, key: str, value: Any) -> None:
        raise OSError("store unavailable")

    async def save(self) -> None:
        raise OSError("store unavailable")


class ReadOnlyStore(KeyValueStore):
    """Store that can be read (always empty) but never written."""

    async def get(self, key: str) -> Any | None:
        return None

    async def set(self, key: str, value: Any) -> None:
        pass

    async def save(self) -> None:
        raise OSError("disk full")


class StubRegistry(StoreRegistry):
    """Registry serving a fixed store class for every path."""

    def __init__(self, config: AppConfig, store_class: type[KeyValueStore]) -> None:
        super().__init__(config)
        self._store_class = store_class

    async def _open(self, path: str) -> KeyValueStore:
        return self._store_class(path)


@pytest.fixture
def registry(app_config: AppConfig) -> StoreRegistry:
    """Registry backed by in-process local storage."""
    return StoreRegistry(app_config)


@pytest.fixture
def file_registry(file_config: AppConfig) -> StoreRegistry:
    """Registry backed by JSON files under a temporary directory."""
    return StoreRegistry(file_config)


@pytest.fixture
def broken_registry(app_config: AppConfig) -> StoreRegistry:
    return StubRegistry(app_config, BrokenStore)


@pytest.fixture
def read_only_registry(app_config: AppConfig) -> StoreRegistry:
    return StubRegistry(app_config, ReadOnlyStore)


@pytest.fixture
def settings_store(registry: StoreRegistry) -> SettingsStore:
    return SettingsStore(registry)


@pytest.fixture
def history_store(registry: StoreRegistry) -> HistoryStore:
    return HistoryStore(registry)
