"""Schema validation returning explicit success/failure values.

``validate`` is the single entry point for checking untrusted data, whether
it came from a provider over the network or was read back from a local
store. It never raises; callers inspect the returned ``Result``.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from jaucp_scorer.scoring.errors import (
    ScorerError,
    SchemaValidationError,
    ValidationIssue,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the error explaining why there is none."""

    value: T | None = None
    error: ScorerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ScorerError) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def issues_from(exc: ValidationError) -> list[ValidationIssue]:
    """Flatten a pydantic error into field-level issues (``details.humor: ...``)."""
    return [
        ValidationIssue(
            path=".".join(str(part) for part in err["loc"]),
            message=err["msg"],
        )
        for err in exc.errors()
    ]


def validate(candidate: Any, shape: Any) -> Result[Any]:
    """Check ``candidate`` against ``shape`` (a model class or a typing form).

    Args:
        candidate: Decoded JSON value of unknown structure.
        shape: Target type, e.g. ``ScoringResult`` or ``list[HistoryItem]``.

    Returns:
        Result holding the validated value, or a SchemaValidationError
        listing every offending field.
    """
    try:
        value = _adapter(shape).validate_python(candidate)
    except ValidationError as e:
        name = getattr(shape, "__name__", str(shape))
        return Result.failure(
            SchemaValidationError(f"Schema validation failed for {name}", issues_from(e))
        )
    return Result.success(value)
