"""Pytest fixtures for jaucp-scorer tests."""

from pathlib import Path
from typing import Any

import pytest
from prometheus_client import CollectorRegistry

from jaucp_scorer.config.settings import AppConfig
from jaucp_scorer.observability.metrics import MetricsCollector
from jaucp_scorer.scoring.schemas import ScoringResult


@pytest.fixture
def app_config() -> AppConfig:
    """Config without a data directory, so stores fall back to local storage."""
    return AppConfig(
        environment="development",
        log_level="DEBUG",
        data_dir=None,
        metrics_enabled=False,
    )


@pytest.fixture
def file_config(tmp_path: Path) -> AppConfig:
    """Config with a writable data directory, so stores are file backed."""
    return AppConfig(
        environment="development",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        metrics_enabled=False,
    )


@pytest.fixture
def metrics() -> MetricsCollector:
    """Collector on a private registry so tests never collide."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def scoring_payload() -> dict[str, Any]:
    """A well-formed scoring verdict as a provider would return it."""
    return {
        "category": "Good",
        "total": 72,
        "details": {
            "humor": 38,
            "structure": 14,
            "format": 7,
            "language": 8,
            "completeness": 5,
        },
        "reasons": {
            "humor": "The running gag about the prefectural mascot lands.",
            "structure": "Loses the thread in the history section.",
            "format": "Has a lead and headings but no infobox.",
            "language": "Reads naturally.",
            "completeness": "The last two sections are stubs.",
        },
        "advice": "Expand the stub sections and tighten the history section.",
    }


@pytest.fixture
def scoring_result(scoring_payload: dict[str, Any]) -> ScoringResult:
    return ScoringResult.model_validate(scoring_payload)


@pytest.fixture
def sample_article() -> str:
    return (
        "\n"
        "   \n"
        "  Tsuchinoko Prefectural Office of Imaginary Affairs  \n"
        "\n"
        "The Tsuchinoko Prefectural Office of Imaginary Affairs is a government body\n"
        "that does not exist, and is very proud of it.\n"
    )
