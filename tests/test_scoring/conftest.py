"""Fixtures for provider client tests."""

import json
from typing import Any

import pytest

from jaucp_scorer.config.settings import AppConfig
from jaucp_scorer.scoring.providers import CerebrasClient, GeminiClient, OpenRouterClient


@pytest.fixture
def provider_config() -> AppConfig:
    """Config pinned to the public endpoints the respx routes use."""
    return AppConfig(
        openrouter_base_url="https://openrouter.ai/api/v1",
        gemini_base_url="https://generativelanguage.googleapis.com/v1beta",
        cerebras_base_url="https://api.cerebras.ai/v1",
        app_title="JAUCP Scoring Tool",
        app_referer=None,
        request_timeout=5.0,
        metrics_enabled=False,
    )


@pytest.fixture
def openrouter(provider_config: AppConfig) -> OpenRouterClient:
    return OpenRouterClient(config=provider_config)


@pytest.fixture
def gemini(provider_config: AppConfig) -> GeminiClient:
    return GeminiClient(config=provider_config)


@pytest.fixture
def cerebras(provider_config: AppConfig) -> CerebrasClient:
    return CerebrasClient(config=provider_config)


@pytest.fixture
def scoring_json(scoring_payload: dict[str, Any]) -> str:
    """The well-formed verdict serialized as assistant text."""
    return json.dumps(scoring_payload, ensure_ascii=False)
