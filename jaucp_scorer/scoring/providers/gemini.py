"""Google Gemini API client.

API docs: https://ai.google.dev/api
Uses the native ``generateContent`` endpoint: the system message becomes
``systemInstruction`` and the article a single ``user`` content. The key is
sent in the ``x-goog-api-key`` header rather than the query string so it
never shows up in logged URLs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jaucp_scorer.scoring.providers.base import SCORING_TEMPERATURE, ProviderClient
from jaucp_scorer.scoring.schemas import Model, Provider
from jaucp_scorer.scoring.validation import validate

MODEL_PREFIX = "models/"

# Large enough to return the whole catalogue in one page
MODELS_PAGE_SIZE = 1000


class GeminiModelEntry(BaseModel):
    """One entry of ``GET /models``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    display_name: str | None = Field(default=None, alias="displayName")
    input_token_limit: int | None = Field(default=None, alias="inputTokenLimit")
    supported_generation_methods: list[str] = Field(
        default_factory=list, alias="supportedGenerationMethods",
    )


class GeminiModelsResponse(BaseModel):
    models: list[GeminiModelEntry] = Field(default_factory=list)


def _model_id(name: str) -> str:
    return name.removeprefix(MODEL_PREFIX)


class GeminiClient(ProviderClient):
    """Client for https://generativelanguage.googleapis.com."""

    provider = Provider.GEMINI

    def _base_url(self) -> str:
        return self._config.gemini_base_url.rstrip("/")

    def _auth_headers(self, credential: str) -> dict[str, str]:
        return {"x-goog-api-key": credential}

    def _models_url(self) -> str:
        return f"{self._base_url()}/models"

    def _models_params(self) -> dict[str, Any]:
        return {"pageSize": MODELS_PAGE_SIZE}

    def _parse_models(self, payload: Any) -> list[Model]:
        envelope = validate(payload, GeminiModelsResponse).unwrap()
        # Embedding and AQA models cannot score anything
        return [
            Model(
                id=_model_id(entry.name),
                name=entry.display_name,
                context_length=entry.input_token_limit or 0,
            )
            for entry in envelope.models
            if "generateContent" in entry.supported_generation_methods
        ]

    def _chat_url(self, model: str) -> str:
        return f"{self._base_url()}/models/{_model_id(model)}:generateContent"

    def _chat_body(self, model: str, messages: list[dict[str, str]]) -> dict[str, Any]:
        system = [m["content"] for m in messages if m["role"] == "system"]
        contents = [
            {"role": "user", "parts": [{"text": m["content"]}]}
            for m in messages
            if m["role"] == "user"
        ]
        body: dict[str, Any] = {
            "contents": contents,
            "generationConfig": {"temperature": SCORING_TEMPERATURE},
        }
        if system:
            body["systemInstruction"] = {"parts": [{"text": text} for text in system]}
        return body

    def _extract_content(self, payload: Any) -> str | None:
        try:
            parts = payload["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            return None
        if not isinstance(parts, list):
            return None
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        return "".join(texts) or None
