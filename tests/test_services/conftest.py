"""Fixtures for scoring service tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from prometheus_client import CollectorRegistry

from jaucp_scorer.config.settings import AppConfig
from jaucp_scorer.observability.metrics import MetricsCollector
from jaucp_scorer.scoring.providers import ProviderClient
from jaucp_scorer.scoring.schemas import Model, Provider
from jaucp_scorer.storage.backend import StoreRegistry
from jaucp_scorer.storage.history import HistoryStore
from jaucp_scorer.storage.schemas import Settings
from jaucp_scorer.storage.settings_store import SettingsStore


def make_client(provider: Provider) -> MagicMock:
    """Provider client double with awaitable operations."""
    client = MagicMock(spec=ProviderClient)
    client.provider = provider
    client.score_article = AsyncMock()
    client.list_models = AsyncMock(return_value=[])
    return client


@pytest.fixture
def clients(scoring_result) -> dict[Provider, MagicMock]:
    """One client double per provider. Scoring succeeds by default."""
    doubles = {provider: make_client(provider) for provider in Provider}
    for client in doubles.values():
        client.score_article.return_value = scoring_result
    return doubles


@pytest.fixture
def metrics_registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def collector(metrics_registry: CollectorRegistry) -> MetricsCollector:
    return MetricsCollector(registry=metrics_registry)


@pytest.fixture
def store_registry(app_config: AppConfig) -> StoreRegistry:
    return StoreRegistry(app_config)


@pytest.fixture
def history(store_registry: StoreRegistry) -> HistoryStore:
    return HistoryStore(store_registry)


@pytest.fixture
def settings_store(store_registry: StoreRegistry) -> SettingsStore:
    return SettingsStore(store_registry)


@pytest.fixture
def configured_settings() -> Settings:
    """OpenRouter selected with a key and a model."""
    return Settings(
        provider=Provider.OPENROUTER,
        openrouter_api_key="sk-or-test",
        selected_model="openai/gpt-4o-mini",
        system_prompt="Rubric.",
    )


@pytest.fixture
def sample_models() -> list[Model]:
    return [Model(id="big", context_length=128000), Model(id="small", context_length=8192)]
