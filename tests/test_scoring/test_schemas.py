"""Tests for scoring data models."""

import pytest
from pydantic import ValidationError

from jaucp_scorer.scoring.schemas import (
    AXIS_MAXIMA,
    Model,
    ModelPricing,
    Provider,
    ScoringResult,
)


class TestScoringResult:
    """Bounds and trust rules of ScoringResult."""

    def test_axes_at_maxima_are_valid(self, scoring_payload) -> None:
        scoring_payload["details"] = dict(AXIS_MAXIMA)
        scoring_payload["total"] = 100

        result = ScoringResult.model_validate(scoring_payload)

        assert result.details.humor == 50
        assert result.details.structure == 20
        assert result.details.completeness == 10

    @pytest.mark.parametrize("axis", list(AXIS_MAXIMA))
    def test_axis_above_maximum_is_rejected(self, scoring_payload, axis: str) -> None:
        scoring_payload["details"][axis] = AXIS_MAXIMA[axis] + 1

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    def test_negative_axis_is_rejected(self, scoring_payload) -> None:
        scoring_payload["details"]["format"] = -1

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    @pytest.mark.parametrize("value", ["30", True, False, None, [30]])
    def test_axis_must_be_a_number(self, scoring_payload, value) -> None:
        scoring_payload["details"]["humor"] = value

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    @pytest.mark.parametrize("value", ["85", True, 85.5])
    def test_total_must_be_an_integer(self, scoring_payload, value) -> None:
        scoring_payload["total"] = value

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    def test_integer_axis_is_accepted(self, scoring_payload) -> None:
        scoring_payload["details"]["humor"] = 30

        result = ScoringResult.model_validate(scoring_payload)

        assert result.details.humor == 30.0

    def test_fractional_axis_is_accepted(self, scoring_payload) -> None:
        scoring_payload["details"]["humor"] = 37.5

        assert ScoringResult.model_validate(scoring_payload).details.humor == 37.5

    def test_total_is_not_recomputed(self, scoring_payload) -> None:
        """The provider's total is kept even when the axes disagree with it."""
        scoring_payload["total"] = 99

        result = ScoringResult.model_validate(scoring_payload)

        assert result.total == 99
        assert sum(result.details.model_dump().values()) == 72

    def test_total_above_100_is_rejected(self, scoring_payload) -> None:
        scoring_payload["total"] = 101

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    def test_missing_reason_is_rejected(self, scoring_payload) -> None:
        del scoring_payload["reasons"]["language"]

        with pytest.raises(ValidationError):
            ScoringResult.model_validate(scoring_payload)

    def test_advice_is_optional(self, scoring_payload) -> None:
        del scoring_payload["advice"]

        result = ScoringResult.model_validate(scoring_payload)

        assert result.advice is None

    def test_axis_maxima_sum_to_100(self) -> None:
        assert sum(AXIS_MAXIMA.values()) == 100


class TestModel:
    """Tests for Model helpers."""

    def test_display_name_falls_back_to_id(self) -> None:
        assert Model(id="openai/gpt-4o").display_name == "openai/gpt-4o"
        assert Model(id="openai/gpt-4o", name="GPT-4o").display_name == "GPT-4o"

    def test_null_context_length_becomes_zero(self) -> None:
        assert Model.model_validate({"id": "x", "context_length": None}).context_length == 0

    def test_pricing_label_per_million_tokens(self) -> None:
        model = Model(
            id="openai/gpt-4o-mini",
            pricing=ModelPricing(prompt="0.00000015", completion="0.0000006"),
        )

        assert model.pricing_label() == "$0.15/0.60 per 1M tokens"

    def test_pricing_label_tolerates_garbage(self) -> None:
        model = Model(id="x", pricing=ModelPricing(prompt="n/a", completion="0"))

        assert model.pricing_label() == "$0.00/0.00 per 1M tokens"

    def test_extra_fields_are_ignored(self) -> None:
        model = Model.model_validate(
            {"id": "x", "context_length": 10, "architecture": {"modality": "text"}}
        )
        assert model.context_length == 10


class TestProvider:
    def test_values(self) -> None:
        assert {p.value for p in Provider} == {"openrouter", "gemini", "cerebras"}
