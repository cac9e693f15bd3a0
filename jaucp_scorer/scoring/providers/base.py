"""Provider client contract and shared HTTP handling.

Every backend exposes the same two operations, ``list_models`` and
``score_article``. The request/response flow lives here once; subclasses
only describe their wire format (URLs, headers, body shape, where the
assistant text sits in the response envelope).

Transport and HTTP failures are translated into the scoring error
taxonomy before they leave this module, so callers never see httpx
exceptions.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx

from jaucp_scorer.config.settings import AppConfig, get_config
from jaucp_scorer.scoring.errors import (
    EmptyResponseError,
    HttpStatusError,
    JsonParseError,
    NetworkError,
)
from jaucp_scorer.scoring.extraction import parse_scoring_response
from jaucp_scorer.scoring.schemas import Model, Provider, ScoringResult

logger = logging.getLogger(__name__)

# Low temperature keeps repeated scoring of the same article close together
SCORING_TEMPERATURE = 0.3


def build_messages(system_prompt: str, article_text: str) -> list[dict[str, str]]:
    """Chat messages for one scoring call: the rubric, then the article."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": article_text},
    ]


class ProviderClient(ABC):
    """Uniform interface over one LLM backend.

    Args:
        config: Application configuration (endpoints, timeout, app title).
        http_client: Optional shared ``httpx.AsyncClient``. When omitted, a
            short-lived client is opened for every request.
    """

    provider: ClassVar[Provider]

    def __init__(
        self,
        config: AppConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or get_config()
        self._http_client = http_client

    async def list_models(self, credential: str) -> list[Model]:
        """Fetch the provider's models, largest context window first.

        Models with equal context lengths keep the order the provider
        returned them in.

        Raises:
            NetworkError, HttpStatusError, JsonParseError, SchemaValidationError
        """
        payload = await self._request_json(
            "GET",
            self._models_url(),
            headers=self._auth_headers(credential),
            params=self._models_params(),
        )
        models = self._parse_models(payload)
        logger.debug("Fetched %d models from %s", len(models), self.provider.value)
        # sorted() stays stable with reverse=True
        return sorted(models, key=lambda m: m.context_length, reverse=True)

    async def score_article(
        self,
        credential: str,
        model: str,
        article_text: str,
        system_prompt: str,
    ) -> ScoringResult:
        """Score one article.

        Args:
            credential: Provider API key.
            model: Model id as returned by list_models.
            article_text: The article, sent verbatim as the user message.
            system_prompt: Scoring rubric, sent as the system message.

        Returns:
            Validated ScoringResult.

        Raises:
            NetworkError: Transport failure.
            HttpStatusError: Non-success status, with the body verbatim.
            EmptyResponseError: No assistant content in the response.
            JsonParseError: Content is not JSON.
            SchemaValidationError: JSON does not match ScoringResult.
        """
        payload = await self._request_json(
            "POST",
            self._chat_url(model),
            headers=self._chat_headers(credential),
            json_body=self._chat_body(model, build_messages(system_prompt, article_text)),
        )
        content = self._extract_content(payload)
        if not content:
            raise EmptyResponseError(f"Empty response from {self.provider.value} model {model}")
        return parse_scoring_response(content)

    # ── Wire format hooks ─────────────────────────────────

    @abstractmethod
    def _auth_headers(self, credential: str) -> dict[str, str]:
        """Headers authenticating a request."""

    def _chat_headers(self, credential: str) -> dict[str, str]:
        headers = self._auth_headers(credential)
        headers["Content-Type"] = "application/json"
        return headers

    @abstractmethod
    def _models_url(self) -> str: ...

    def _models_params(self) -> dict[str, Any] | None:
        return None

    @abstractmethod
    def _parse_models(self, payload: Any) -> list[Model]:
        """Turn the decoded model list response into Models (unsorted)."""

    @abstractmethod
    def _chat_url(self, model: str) -> str: ...

    @abstractmethod
    def _chat_body(self, model: str, messages: list[dict[str, str]]) -> dict[str, Any]: ...

    @abstractmethod
    def _extract_content(self, payload: Any) -> str | None:
        """Assistant text from the decoded response, or None if absent."""

    # ── HTTP ──────────────────────────────────────────────

    async def _request_json(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode its JSON body. No retries."""
        # Configured timeout wins over a shared client's own default
        timeout = httpx.Timeout(self._config.request_timeout)
        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method, url, headers=headers, params=params, json=json_body, timeout=timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.request(
                        method, url, headers=headers, params=params, json=json_body,
                    )
        except httpx.TransportError as e:
            logger.warning("%s request to %s failed: %s", method, url, type(e).__name__)
            raise NetworkError(f"Could not reach {self.provider.value}: {e}") from e

        if not response.is_success:
            logger.warning(
                "%s request to %s returned status %d", method, url, response.status_code,
            )
            raise HttpStatusError(
                f"{self.provider.value} API error",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise JsonParseError(
                f"{self.provider.value} returned a body that is not JSON",
                raw_content=response.text,
                parser_message=str(e),
            ) from e
