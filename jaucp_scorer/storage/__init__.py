"""Local persistence for settings and scoring history.

Components:
- KeyValueStore: Async get/set/save contract
- JsonFileStore / LocalStorageStore: Durable and fallback implementations
- StoreRegistry: Per-path store handle cache, chooses the implementation
- SettingsStore: Provider, credentials, model and prompt with legacy migration
- HistoryStore: Newest-first log capped at the configured capacity
"""

from jaucp_scorer.storage.backend import (
    JsonFileStore,
    KeyValueStore,
    LocalStorageStore,
    StoreRegistry,
)
from jaucp_scorer.storage.history import HistoryStore, derive_title
from jaucp_scorer.storage.schemas import HistoryItem, Settings, SettingsUpdate
from jaucp_scorer.storage.settings_store import SettingsStore, default_settings

__all__ = [
    "HistoryItem",
    "HistoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "LocalStorageStore",
    "Settings",
    "SettingsStore",
    "SettingsUpdate",
    "StoreRegistry",
    "default_settings",
    "derive_title",
]
