"""Observability layer - logging and metrics."""

from jaucp_scorer.observability.logging import get_logger, scoring_context, setup_logging
from jaucp_scorer.observability.metrics import MetricsCollector, get_metrics

__all__ = ["setup_logging", "get_logger", "scoring_context", "MetricsCollector", "get_metrics"]
