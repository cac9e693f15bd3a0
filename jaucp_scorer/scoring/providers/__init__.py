"""Provider clients, one per LLM backend, behind a common interface.

Components:
- ProviderClient: Abstract contract (list_models, score_article)
- OpenRouterClient / CerebrasClient: OpenAI-compatible chat completions
- GeminiClient: Native generateContent API
- build_default_clients: Provider tag to client mapping used by the orchestrator
"""

import httpx

from jaucp_scorer.config.settings import AppConfig
from jaucp_scorer.scoring.providers.base import SCORING_TEMPERATURE, ProviderClient, build_messages
from jaucp_scorer.scoring.providers.cerebras import CerebrasClient
from jaucp_scorer.scoring.providers.gemini import GeminiClient
from jaucp_scorer.scoring.providers.openai_compatible import OpenAICompatibleClient
from jaucp_scorer.scoring.providers.openrouter import OpenRouterClient
from jaucp_scorer.scoring.schemas import Provider

CLIENT_CLASSES: dict[Provider, type[ProviderClient]] = {
    Provider.OPENROUTER: OpenRouterClient,
    Provider.GEMINI: GeminiClient,
    Provider.CEREBRAS: CerebrasClient,
}


def build_default_clients(
    config: AppConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> dict[Provider, ProviderClient]:
    """Instantiate one client per supported provider."""
    return {
        provider: cls(config=config, http_client=http_client)
        for provider, cls in CLIENT_CLASSES.items()
    }


__all__ = [
    "CLIENT_CLASSES",
    "SCORING_TEMPERATURE",
    "CerebrasClient",
    "GeminiClient",
    "OpenAICompatibleClient",
    "OpenRouterClient",
    "ProviderClient",
    "build_default_clients",
    "build_messages",
]
