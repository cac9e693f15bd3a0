"""Error taxonomy for scoring and persistence.

Every failure a caller can see is one of these classes. Provider-specific
exceptions (httpx errors, JSON decoder errors, pydantic validation errors)
are translated at the boundary and kept as ``__cause__``.
"""

from dataclasses import dataclass


class ScorerError(Exception):
    """Base exception; ``str(error)`` is suitable for showing to a user."""


class ConfigurationError(ScorerError):
    """Credential or model missing. Raised before any network call."""


class ScoringBusyError(ScorerError):
    """A scoring call was submitted while another one is still in flight."""


class ClientError(ScorerError):
    """Base exception for provider call failures."""


class NetworkError(ClientError):
    """The transport call itself failed (DNS, connection refused, ...)."""


class HttpStatusError(ClientError):
    """The provider answered with a non-success status."""

    def __init__(self, message: str, status_code: int, response_body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.status_code}): {self.response_body}"


class EmptyResponseError(ClientError):
    """Successful response without any assistant content."""


class JsonParseError(ClientError):
    """Assistant content could not be parsed as JSON."""

    def __init__(self, message: str, raw_content: str, parser_message: str) -> None:
        super().__init__(message)
        self.raw_content = raw_content
        self.parser_message = parser_message

    def __str__(self) -> str:
        return f"{self.args[0]}: {self.parser_message}\n\nResponse: {self.raw_content}"


@dataclass(frozen=True)
class ValidationIssue:
    """One field-level schema violation."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class SchemaValidationError(ClientError):
    """Parsed JSON (or stored data) does not match the expected shape."""

    def __init__(self, message: str, issues: list[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = issues

    def __str__(self) -> str:
        details = "; ".join(str(issue) for issue in self.issues)
        return f"{self.args[0]}: {details}" if details else self.args[0]


class PersistenceError(ScorerError):
    """A settings or history write could not be completed."""
