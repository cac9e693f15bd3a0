"""LLM-powered article scoring.

Sends an article to one of several LLM providers (OpenRouter, Gemini,
Cerebras), extracts the JSON verdict from the reply and validates it
against a five-axis rubric (humor, structure, format, language,
completeness; 100 points total).

Usage:
    from jaucp_scorer.services import ScoringOrchestrator

    orchestrator = ScoringOrchestrator(settings_store=settings_store)
    outcome = await orchestrator.score(article_text)
"""

from jaucp_scorer.scoring.errors import (
    ClientError,
    ConfigurationError,
    EmptyResponseError,
    HttpStatusError,
    JsonParseError,
    NetworkError,
    PersistenceError,
    SchemaValidationError,
    ScorerError,
    ScoringBusyError,
    ValidationIssue,
)
from jaucp_scorer.scoring.extraction import extract_json_payload, parse_scoring_response
from jaucp_scorer.scoring.prompts import DEFAULT_SYSTEM_PROMPT
from jaucp_scorer.scoring.schemas import (
    AXIS_MAXIMA,
    Model,
    ModelPricing,
    Provider,
    ScoringDetails,
    ScoringReasons,
    ScoringResult,
)
from jaucp_scorer.scoring.validation import Result, validate

__all__ = [
    "AXIS_MAXIMA",
    "ClientError",
    "ConfigurationError",
    "DEFAULT_SYSTEM_PROMPT",
    "EmptyResponseError",
    "HttpStatusError",
    "JsonParseError",
    "Model",
    "ModelPricing",
    "NetworkError",
    "PersistenceError",
    "Provider",
    "Result",
    "SchemaValidationError",
    "ScorerError",
    "ScoringBusyError",
    "ScoringDetails",
    "ScoringReasons",
    "ScoringResult",
    "ValidationIssue",
    "extract_json_payload",
    "parse_scoring_response",
    "validate",
]
