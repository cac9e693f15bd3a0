"""Data models for the article scoring pipeline.

Defines the structured result every provider must produce and the
descriptive model metadata returned by model list calls.

Scores follow a five-axis rubric whose maxima add up to 100:
humor (50), structure (20), format (10), language (10), completeness (10).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Provider(str, Enum):
    """LLM backends an article can be scored with."""

    OPENROUTER = "openrouter"
    GEMINI = "gemini"
    CEREBRAS = "cerebras"


AXIS_MAXIMA: dict[str, int] = {
    "humor": 50,
    "structure": 20,
    "format": 10,
    "language": 10,
    "completeness": 10,
}


class ScoringDetails(BaseModel):
    """Per-axis scores, each bounded by its own maximum.

    - humor: Wit, satire and comedic payoff
    - structure: Consistency of the joke and the article's through-line
    - format: Encyclopedia-style layout (headings, lead, sections)
    - language: Naturalness of the prose
    - completeness: Overall polish
    """

    humor: float = Field(ge=0, le=AXIS_MAXIMA["humor"], strict=True)
    structure: float = Field(ge=0, le=AXIS_MAXIMA["structure"], strict=True)
    format: float = Field(ge=0, le=AXIS_MAXIMA["format"], strict=True)
    language: float = Field(ge=0, le=AXIS_MAXIMA["language"], strict=True)
    completeness: float = Field(ge=0, le=AXIS_MAXIMA["completeness"], strict=True)


class ScoringReasons(BaseModel):
    """One free-text justification per axis, keyed like ScoringDetails."""

    humor: str
    structure: str
    format: str
    language: str
    completeness: str


class ScoringResult(BaseModel):
    """Full assessment of one article.

    ``total`` is taken as the provider reported it. It is not recomputed
    from ``details`` and the axis values are not required to add up to it.
    Scores must be JSON numbers; numeric strings and booleans are rejected.
    """

    category: str = Field(description="Provider-assigned label, e.g. a rating band")
    total: int = Field(ge=0, le=100, strict=True)
    details: ScoringDetails
    reasons: ScoringReasons
    advice: str | None = Field(default=None, description="Improvement suggestions")


class ModelPricing(BaseModel):
    """Per-token USD prices as the provider reports them (decimal strings)."""

    prompt: str = "0"
    completion: str = "0"


class Model(BaseModel):
    """A model offered by a provider. Purely descriptive."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    context_length: int = 0
    pricing: ModelPricing = Field(default_factory=ModelPricing)

    @field_validator("context_length", mode="before")
    @classmethod
    def _null_context_length(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def display_name(self) -> str:
        """Human-facing name, falling back to the id."""
        return self.name or self.id

    def pricing_label(self) -> str:
        """Format prices as dollars per million tokens, e.g. ``$0.15/0.60 per 1M tokens``."""
        prompt = _per_million(self.pricing.prompt)
        completion = _per_million(self.pricing.completion)
        return f"${prompt:.2f}/{completion:.2f} per 1M tokens"


def _per_million(price: str) -> float:
    try:
        return float(price) * 1_000_000
    except ValueError:
        return 0.0
