"""Cerebras Inference API client.

API docs: https://inference-docs.cerebras.ai/api-reference
OpenAI-compatible. The model list does not always report context length or
pricing; missing values default to 0, which leaves such models in the order
the API returned them.
"""

from typing import Any

from pydantic import BaseModel, Field

from jaucp_scorer.scoring.providers.openai_compatible import OpenAICompatibleClient
from jaucp_scorer.scoring.schemas import Model, Provider
from jaucp_scorer.scoring.validation import validate


class CerebrasModelEntry(BaseModel):
    """One entry of ``GET /models``."""

    id: str
    owned_by: str | None = None
    context_length: int | None = None
    max_context_length: int | None = None


class CerebrasModelsResponse(BaseModel):
    data: list[CerebrasModelEntry] = Field(default_factory=list)


class CerebrasClient(OpenAICompatibleClient):
    """Client for https://api.cerebras.ai."""

    provider = Provider.CEREBRAS

    def _base_url(self) -> str:
        return self._config.cerebras_base_url.rstrip("/")

    def _parse_models(self, payload: Any) -> list[Model]:
        envelope = validate(payload, CerebrasModelsResponse).unwrap()
        return [
            Model(
                id=entry.id,
                context_length=entry.context_length or entry.max_context_length or 0,
            )
            for entry in envelope.data
        ]
