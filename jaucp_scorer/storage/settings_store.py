"""Settings persistence with legacy-key migration.

Reads never fail: a broken store or malformed contents both yield the
default settings. Writes are partial and raise PersistenceError.

Before multiple providers were supported a single ``apiKey`` held the
OpenRouter key. When ``openrouterApiKey`` is absent, that legacy value is
surfaced in its place. It is never copied into the new key by a read.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jaucp_scorer.scoring.errors import PersistenceError
from jaucp_scorer.scoring.prompts import DEFAULT_SYSTEM_PROMPT
from jaucp_scorer.scoring.schemas import Provider
from jaucp_scorer.scoring.validation import validate
from jaucp_scorer.storage.backend import StoreRegistry
from jaucp_scorer.storage.schemas import Settings, SettingsUpdate

logger = logging.getLogger(__name__)

LEGACY_API_KEY = "apiKey"

# Stored key for every Settings field, e.g. selected_model -> selectedModel
SETTINGS_KEYS: dict[str, str] = {
    name: field.alias or name for name, field in Settings.model_fields.items()
}


def default_settings() -> Settings:
    """Settings used when nothing usable is stored."""
    return Settings()


class SettingsStore:
    """Reads and writes user settings through a StoreRegistry.

    Args:
        registry: Store handle cache shared with other stores.
        path: Logical store path. Defaults to ``config.settings_store_path``.
    """

    def __init__(self, registry: StoreRegistry, path: str | None = None) -> None:
        self._registry = registry
        self._path = path or registry.config.settings_store_path

    async def load(self) -> Settings:
        """Load settings, degrading to defaults on any read or schema problem."""
        try:
            store = await self._registry.get_store(self._path)
            raw = {key: await store.get(key) for key in SETTINGS_KEYS.values()}
            legacy_key = await store.get(LEGACY_API_KEY)
        except Exception as e:
            logger.warning("Failed to read settings, using defaults: %s", e)
            return default_settings()

        openrouter_key = raw[SETTINGS_KEYS["openrouter_api_key"]]
        if openrouter_key is None:
            openrouter_key = legacy_key

        candidate: dict[str, Any] = {
            **raw,
            SETTINGS_KEYS["provider"]: raw[SETTINGS_KEYS["provider"]] or Provider.OPENROUTER.value,
            SETTINGS_KEYS["openrouter_api_key"]: openrouter_key,
            SETTINGS_KEYS["system_prompt"]: raw[SETTINGS_KEYS["system_prompt"]] or DEFAULT_SYSTEM_PROMPT,
        }

        result = validate(candidate, Settings)
        if not result.ok:
            logger.warning("Stored settings are invalid, using defaults: %s", result.error)
            return default_settings()
        return result.value

    async def save(self, update: SettingsUpdate | Mapping[str, Any]) -> None:
        """Write the explicitly set fields of ``update`` and flush.

        Accepts a SettingsUpdate or a mapping using either field or stored
        names; keys not present are left untouched in storage.

        Raises:
            SchemaValidationError: ``update`` is a mapping with invalid fields.
            PersistenceError: The store could not be written.
        """
        if not isinstance(update, SettingsUpdate):
            update = validate(dict(update), SettingsUpdate).unwrap()

        items = update.to_store_items()
        try:
            store = await self._registry.get_store(self._path)
            for key, value in items.items():
                await store.set(key, value)
            await store.save()
        except Exception as e:
            raise PersistenceError(f"Failed to save settings: {e}") from e
        logger.debug("Saved settings keys: %s", sorted(items))

    async def has_api_key(self) -> bool:
        """Whether a credential is stored for the currently selected provider."""
        return (await self.load()).has_credential
