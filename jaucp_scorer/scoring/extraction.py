"""Extraction of the JSON payload from free-form assistant text.

Models often wrap their answer in a Markdown code fence even when told not
to. The payload is located in two steps:

1. Look for the first fence labelled ``json`` and take its interior.
2. Otherwise treat the whole text as the payload.

Both paths end in the same ``json.loads`` call, and the decoded value is
checked against ``ScoringResult``.
"""

import json
import logging

from jaucp_scorer.scoring.errors import JsonParseError
from jaucp_scorer.scoring.schemas import ScoringResult
from jaucp_scorer.scoring.validation import validate

logger = logging.getLogger(__name__)

FENCE = "```"
JSON_FENCE = FENCE + "json"


def extract_json_payload(text: str) -> str:
    """Return the JSON candidate inside ``text``.

    The opening marker is case-sensitive. An opening fence without a
    closing one is treated as no fence at all.
    """
    start = text.find(JSON_FENCE)
    if start != -1:
        body_start = start + len(JSON_FENCE)
        end = text.find(FENCE, body_start)
        if end != -1:
            return text[body_start:end].strip()
    return text.strip()


def parse_scoring_response(text: str) -> ScoringResult:
    """Parse assistant text into a validated ScoringResult.

    Raises:
        JsonParseError: The candidate is not valid JSON. Carries the raw
            text and the decoder message.
        SchemaValidationError: The JSON decodes but has the wrong shape.
    """
    candidate = extract_json_payload(text)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning("Assistant content is not JSON: %s", e)
        raise JsonParseError("Failed to parse JSON response", raw_content=text, parser_message=str(e)) from e

    return validate(data, ScoringResult).unwrap()
