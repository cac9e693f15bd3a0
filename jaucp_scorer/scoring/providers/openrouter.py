"""OpenRouter API client.

API docs: https://openrouter.ai/docs/api-reference/overview
The model list carries context length and per-token pricing for every model.
"""

from typing import Any

from pydantic import BaseModel

from jaucp_scorer.scoring.providers.openai_compatible import OpenAICompatibleClient
from jaucp_scorer.scoring.schemas import Model, Provider
from jaucp_scorer.scoring.validation import validate


class OpenRouterModelsResponse(BaseModel):
    """Envelope of ``GET /models``."""

    data: list[Model]


class OpenRouterClient(OpenAICompatibleClient):
    """Client for https://openrouter.ai."""

    provider = Provider.OPENROUTER

    def _base_url(self) -> str:
        return self._config.openrouter_base_url.rstrip("/")

    def _auth_headers(self, credential: str) -> dict[str, str]:
        headers = super()._auth_headers(credential)
        # OpenRouter attributes traffic to apps by these headers
        headers["X-Title"] = self._config.app_title
        if self._config.app_referer:
            headers["HTTP-Referer"] = self._config.app_referer
        return headers

    def _parse_models(self, payload: Any) -> list[Model]:
        return validate(payload, OpenRouterModelsResponse).unwrap().data
