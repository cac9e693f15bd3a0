"""Key-value persistence backends.

Two interchangeable implementations of ``KeyValueStore``:

- JsonFileStore: durable, one JSON object file per store path under the
  configured data directory.
- LocalStorageStore: in-memory map mirrored into a string-valued "local
  storage" mapping (path -> serialized JSON), used when no data directory
  is available.

``StoreRegistry`` picks one on first access to a path and hands out the
same instance afterwards. Writes made with ``set`` are only durable after
``save``; several ``set`` calls followed by one ``save`` are not atomic.
"""

import asyncio
import copy
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from jaucp_scorer.config.settings import AppConfig, get_config

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Async key-value namespace addressed by a logical store path."""

    def __init__(self, path: str) -> None:
        self.path = path

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return a copy of the value stored under ``key``, or None if absent."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Stage ``value`` under ``key``. Not durable until ``save``."""

    @abstractmethod
    async def save(self) -> None:
        """Flush all staged values."""


def _snapshot(value: Any) -> Any:
    # Round-trip through JSON so stored values are plain data and never
    # share mutable state with the caller
    return json.loads(json.dumps(value, ensure_ascii=False))


def _read_json_object(file_path: Path) -> dict[str, Any]:
    if not file_path.exists():
        return {}
    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} does not contain a JSON object")
    return data


def _write_json_atomic(file_path: Path, data: dict[str, Any]) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    # Unique temp name per write so concurrent saves never share one
    with tempfile.NamedTemporaryFile(
        "w",
        dir=file_path.parent,
        prefix=file_path.name + ".",
        suffix=".tmp",
        delete=False,
        encoding="utf-8",
    ) as tmp:
        tmp_path = Path(tmp.name)
    try:
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class JsonFileStore(KeyValueStore):
    """Durable store backed by a JSON file.

    The whole file is read once when the store is opened and rewritten on
    every ``save`` (temp file + rename, so a crash never leaves a truncated
    file behind). Saves on one store run one at a time.
    """

    def __init__(self, path: str, file_path: Path, data: dict[str, Any] | None = None) -> None:
        super().__init__(path)
        self.file_path = file_path
        self._data: dict[str, Any] = data if data is not None else {}
        self._save_lock = asyncio.Lock()

    @classmethod
    async def open(cls, path: str, file_path: Path) -> "JsonFileStore":
        """Load ``file_path``. A missing file is an empty store.

        Raises:
            OSError: File exists but cannot be read.
            ValueError: File is not a JSON object.
        """
        data = await asyncio.to_thread(_read_json_object, file_path)
        return cls(path, file_path, data)

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = _snapshot(value)

    async def save(self) -> None:
        snapshot = copy.deepcopy(self._data)
        async with self._save_lock:
            await asyncio.to_thread(_write_json_atomic, self.file_path, snapshot)


class LocalStorageStore(KeyValueStore):
    """In-memory store mirrored into a local storage mapping on ``save``.

    An unreadable or corrupt entry in local storage starts the store empty
    instead of failing.
    """

    def __init__(self, path: str, local_storage: MutableMapping[str, str]) -> None:
        super().__init__(path)
        self._local_storage = local_storage
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        try:
            stored = self._local_storage.get(self.path)
            data = json.loads(stored) if stored else {}
            if not isinstance(data, dict):
                raise ValueError("stored value is not a JSON object")
        except Exception as e:
            logger.warning("Local storage read failed for %s: %s", self.path, e)
            return {}
        return data

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = _snapshot(value)

    async def save(self) -> None:
        self._local_storage[self.path] = json.dumps(self._data, ensure_ascii=False)


class StoreRegistry:
    """Cache of open stores keyed by logical path.

    The first ``get_store`` call for a path looks for a usable data
    directory. If one is configured and can be created, the path is served
    by a JsonFileStore; otherwise (or if opening the file fails) by a
    LocalStorageStore. The choice is made once per path.

    Args:
        config: Application configuration (``data_dir``).
        local_storage: Mapping used by the fallback store. Defaults to a
            fresh dict private to this registry.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        local_storage: MutableMapping[str, str] | None = None,
    ) -> None:
        self.config = config or get_config()
        self.local_storage: MutableMapping[str, str] = (
            local_storage if local_storage is not None else {}
        )
        self._stores: dict[str, KeyValueStore] = {}
        self._lock = asyncio.Lock()

    async def get_store(self, path: str) -> KeyValueStore:
        """Return the store for ``path``, opening it on first use."""
        async with self._lock:
            store = self._stores.get(path)
            if store is None:
                store = await self._open(path)
                self._stores[path] = store
            return store

    async def _open(self, path: str) -> KeyValueStore:
        data_dir = self.config.data_dir
        if data_dir is None:
            logger.debug("No data directory configured, using local storage for %s", path)
            return LocalStorageStore(path, self.local_storage)

        data_dir = data_dir.expanduser()
        try:
            await asyncio.to_thread(data_dir.mkdir, parents=True, exist_ok=True)
            store = await JsonFileStore.open(path, data_dir / path)
        except (OSError, ValueError) as e:
            logger.debug("Falling back to local storage for %s: %s", path, e)
            return LocalStorageStore(path, self.local_storage)

        logger.debug("Opened file store for %s at %s", path, store.file_path)
        return store
