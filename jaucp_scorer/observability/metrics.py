"""
Prometheus metrics for the scoring pipeline.

Defines metrics for:
- Scoring requests per provider and outcome
- Scoring latency
- Model list fetches
- History write failures

Collectors register against the default registry unless one is passed in,
so tests can use an isolated ``CollectorRegistry``.
"""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

# LLM calls are slow; buckets reach well past typical completion times
LATENCY_BUCKETS = (0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0)


class MetricsCollector:
    """
    Prometheus metrics collector for the scoring tool.

    Usage:
        metrics = MetricsCollector()
        metrics.record_scoring("openrouter", "success", latency=3.2)
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        registry = registry if registry is not None else REGISTRY

        self.scoring_requests = Counter(
            "jaucp_scoring_requests_total",
            "Total scoring requests by provider and outcome",
            ["provider", "outcome"],  # outcome: success or an error class name
            registry=registry,
        )

        self.scoring_latency = Histogram(
            "jaucp_scoring_latency_seconds",
            "Time spent waiting on a provider to score an article",
            ["provider"],
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )

        self.model_list_requests = Counter(
            "jaucp_model_list_requests_total",
            "Total model list fetches by provider and outcome",
            ["provider", "outcome"],
            registry=registry,
        )

        self.history_write_failures = Counter(
            "jaucp_history_write_failures_total",
            "History appends that failed after a successful scoring call",
            registry=registry,
        )

    def record_scoring(self, provider: str, outcome: str, latency: float | None = None) -> None:
        """
        Record a finished scoring call.

        Args:
            provider: Provider tag (openrouter, gemini, cerebras)
            outcome: "success" or the error class name
            latency: Seconds spent in the provider call, if one was made
        """
        self.scoring_requests.labels(provider=provider, outcome=outcome).inc()
        if latency is not None:
            self.scoring_latency.labels(provider=provider).observe(latency)

    def record_model_list(self, provider: str, outcome: str) -> None:
        """Record a finished model list fetch."""
        self.model_list_requests.labels(provider=provider, outcome=outcome).inc()

    def record_history_write_failure(self) -> None:
        """Record a history append that could not be persisted."""
        self.history_write_failures.inc()


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
