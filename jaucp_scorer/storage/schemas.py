"""Persisted entities: user settings and scoring history.

Settings are stored one key per field using camelCase names, the format
older versions of the tool wrote. ``SettingsUpdate`` expresses a partial
write: only fields that were explicitly given are written, whatever their
value (an empty string is a real value, e.g. to clear a key).
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jaucp_scorer.scoring.prompts import DEFAULT_SYSTEM_PROMPT
from jaucp_scorer.scoring.schemas import Provider, ScoringResult

_CREDENTIAL_FIELDS: dict[Provider, str] = {
    Provider.OPENROUTER: "openrouter_api_key",
    Provider.GEMINI: "gemini_api_key",
    Provider.CEREBRAS: "cerebras_api_key",
}


class Settings(BaseModel):
    """User settings. Exactly one credential is current: the one for ``provider``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    provider: Provider = Provider.OPENROUTER
    openrouter_api_key: str | None = None
    gemini_api_key: str | None = None
    cerebras_api_key: str | None = None
    selected_model: str | None = None
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    def credential_for(self, provider: Provider) -> str | None:
        """Credential saved for ``provider``. Never falls back to another provider's."""
        return getattr(self, _CREDENTIAL_FIELDS[provider])

    @property
    def current_credential(self) -> str | None:
        return self.credential_for(self.provider)

    @property
    def has_credential(self) -> bool:
        return bool(self.current_credential)


class SettingsUpdate(BaseModel):
    """Partial settings write. Unset fields leave storage untouched."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    provider: Provider | None = None
    openrouter_api_key: str | None = None
    gemini_api_key: str | None = None
    cerebras_api_key: str | None = None
    selected_model: str | None = None
    system_prompt: str | None = None

    def to_store_items(self) -> dict[str, Any]:
        """Explicitly set fields keyed by their stored (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class HistoryItem(BaseModel):
    """One past scoring result, created when a scoring call succeeds.

    ``category`` and ``total`` duplicate the wrapped result so a history
    list can be rendered without touching ``result``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    title: str
    category: str
    total: int
    result: ScoringResult
