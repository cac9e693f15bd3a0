"""Scoring orchestration.

Single entry point for the presentation layer. Resolves the active
provider, credential and model from settings, dispatches to the matching
provider client and turns every outcome into a ``Result``.

- At most one scoring call per orchestrator is in flight; a second
  submission is rejected, not queued.
- Missing configuration fails before any network call.
- Successful results are recorded in the history store on a best-effort
  basis; a history write failure never turns a success into a failure.
- No retries: a failed call must be resubmitted by the user.

Usage:
    registry = StoreRegistry()
    orchestrator = ScoringOrchestrator(
        settings_store=SettingsStore(registry),
        history_store=HistoryStore(registry),
    )
    outcome = await orchestrator.score(article_text)
    if outcome.ok:
        render(outcome.value)
    else:
        show_error(str(outcome.error))
"""

import asyncio
import time
from collections.abc import Iterable, Mapping

from jaucp_scorer.config.settings import AppConfig, get_config
from jaucp_scorer.observability.logging import get_logger, scoring_context
from jaucp_scorer.observability.metrics import MetricsCollector, get_metrics
from jaucp_scorer.scoring.errors import (
    ClientError,
    ConfigurationError,
    PersistenceError,
    ScorerError,
    ScoringBusyError,
)
from jaucp_scorer.scoring.providers import ProviderClient, build_default_clients
from jaucp_scorer.scoring.schemas import Model, Provider, ScoringResult
from jaucp_scorer.scoring.validation import Result
from jaucp_scorer.storage.history import HistoryStore
from jaucp_scorer.storage.schemas import Settings
from jaucp_scorer.storage.settings_store import SettingsStore, default_settings

logger = get_logger(__name__)


class ScoringOrchestrator:
    """Dispatches scoring and model listing to the selected provider.

    Args:
        clients: Provider tag to client mapping. Defaults to one client per
            supported provider.
        settings_store: Used when ``score``/``list_models`` get no settings.
        history_store: Receives every successful result. Optional.
        metrics: Metrics collector. Defaults to the global collector unless
            metrics are disabled in config.
        config: Application configuration.
    """

    def __init__(
        self,
        clients: Mapping[Provider, ProviderClient] | None = None,
        settings_store: SettingsStore | None = None,
        history_store: HistoryStore | None = None,
        metrics: MetricsCollector | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self._config = config or get_config()
        self._clients: dict[Provider, ProviderClient] = (
            dict(clients) if clients is not None else build_default_clients(self._config)
        )
        self._settings_store = settings_store
        self._history_store = history_store
        if metrics is None and self._config.metrics_enabled:
            metrics = get_metrics()
        self._metrics = metrics
        self._busy = False

    @property
    def is_busy(self) -> bool:
        """True while a scoring call is outstanding."""
        return self._busy

    def client_for(self, provider: Provider) -> ProviderClient:
        """Client registered for ``provider``.

        Raises:
            ConfigurationError: No client is registered for it.
        """
        try:
            return self._clients[provider]
        except KeyError:
            raise ConfigurationError(f"No client registered for provider {provider.value}") from None

    async def score(self, article_text: str, settings: Settings | None = None) -> Result[ScoringResult]:
        """Score ``article_text`` with the provider selected in ``settings``.

        Args:
            article_text: Article to score, sent verbatim.
            settings: Settings to use. Loaded from the settings store (or
                defaults) when omitted.

        Returns:
            Result with the ScoringResult, or with one of the scoring errors.
        """
        if self._busy:
            logger.warning("Scoring rejected, another request is in flight")
            return Result.failure(ScoringBusyError("A scoring request is already in progress"))

        self._busy = True
        try:
            return await self._score(article_text, settings)
        finally:
            self._busy = False

    async def _score(self, article_text: str, settings: Settings | None) -> Result[ScoringResult]:
        settings = await self._resolve_settings(settings)
        provider = settings.provider
        credential = settings.current_credential
        model = settings.selected_model

        if not credential or not model:
            error = ConfigurationError("API key or model is not configured")
            self._record_scoring(provider, error)
            return Result.failure(error)

        with scoring_context(provider.value, model):
            started = time.monotonic()
            try:
                client = self.client_for(provider)
                result = await client.score_article(
                    credential, model, article_text, settings.system_prompt,
                )
            except ScorerError as e:
                logger.warning("Scoring failed", error_type=type(e).__name__, error=str(e))
                self._record_scoring(provider, e, time.monotonic() - started)
                return Result.failure(e)

            latency = time.monotonic() - started
            logger.info(
                "Article scored",
                total=result.total,
                category=result.category,
                latency=round(latency, 2),
            )
            self._record_scoring(provider, None, latency)
            await self._record_history(result, article_text)
        return Result.success(result)

    async def list_models(self, settings: Settings | None = None) -> Result[list[Model]]:
        """Models of the active provider, largest context window first."""
        settings = await self._resolve_settings(settings)
        return await self._list_models(settings, settings.provider)

    async def list_models_for(
        self,
        providers: Iterable[Provider],
        settings: Settings | None = None,
    ) -> dict[Provider, Result[list[Model]]]:
        """Fetch model lists from several providers concurrently.

        Each provider succeeds or fails on its own; one failing branch never
        hides another branch's models.
        """
        settings = await self._resolve_settings(settings)
        providers = list(providers)
        outcomes = await asyncio.gather(
            *(self._list_models(settings, provider) for provider in providers),
            return_exceptions=True,
        )

        results: dict[Provider, Result[list[Model]]] = {}
        for provider, outcome in zip(providers, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "Unexpected error listing models",
                    provider=provider.value,
                    error=str(outcome),
                )
                outcome = Result.failure(ClientError(f"Unexpected error: {outcome}"))
            results[provider] = outcome
        return results

    async def _list_models(self, settings: Settings, provider: Provider) -> Result[list[Model]]:
        credential = settings.credential_for(provider)
        if not credential:
            error = ConfigurationError(f"API key for {provider.value} is not configured")
            self._record_model_list(provider, error)
            return Result.failure(error)

        with scoring_context(provider.value):
            try:
                models = await self.client_for(provider).list_models(credential)
            except ScorerError as e:
                logger.warning(
                    "Model list fetch failed",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                self._record_model_list(provider, e)
                return Result.failure(e)

        self._record_model_list(provider, None)
        return Result.success(models)

    async def _resolve_settings(self, settings: Settings | None) -> Settings:
        if settings is not None:
            return settings
        if self._settings_store is not None:
            return await self._settings_store.load()
        return default_settings()

    async def _record_history(self, result: ScoringResult, article_text: str) -> None:
        if self._history_store is None:
            return
        try:
            await self._history_store.append(result, article_text)
        except PersistenceError as e:
            logger.warning("Failed to record scoring history", error=str(e))
            if self._metrics is not None:
                self._metrics.record_history_write_failure()

    def _record_scoring(
        self,
        provider: Provider,
        error: ScorerError | None,
        latency: float | None = None,
    ) -> None:
        if self._metrics is not None:
            outcome = "success" if error is None else type(error).__name__
            self._metrics.record_scoring(provider.value, outcome, latency)

    def _record_model_list(self, provider: Provider, error: ScorerError | None) -> None:
        if self._metrics is not None:
            outcome = "success" if error is None else type(error).__name__
            self._metrics.record_model_list(provider.value, outcome)
