"""Shared wire format for providers speaking the OpenAI chat completions dialect."""

from abc import abstractmethod
from typing import Any

from jaucp_scorer.scoring.providers.base import SCORING_TEMPERATURE, ProviderClient


class OpenAICompatibleClient(ProviderClient):
    """Bearer auth, ``GET /models`` and ``POST /chat/completions``."""

    @abstractmethod
    def _base_url(self) -> str: ...

    def _auth_headers(self, credential: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {credential}"}

    def _models_url(self) -> str:
        return f"{self._base_url()}/models"

    def _chat_url(self, model: str) -> str:
        return f"{self._base_url()}/chat/completions"

    def _chat_body(self, model: str, messages: list[dict[str, str]]) -> dict[str, Any]:
        return {
            "model": model,
            "messages": messages,
            "temperature": SCORING_TEMPERATURE,
        }

    def _extract_content(self, payload: Any) -> str | None:
        try:
            content = payload["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
