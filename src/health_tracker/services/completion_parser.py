"""Recover a JSON object from free-form model output."""

import json

from health_tracker.domain.errors import ExtractionFormatError, ExtractionParseError


def extract_json_object(text: str) -> dict[str, object]:
    """Parse the span from the first ``{`` to the last ``}`` as a JSON object.

    Prose, code fences and trailing commentary around the object are ignored.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ExtractionFormatError("No JSON object found in completion")
    try:
        payload = json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        raise ExtractionParseError(f"Invalid JSON in completion: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise ExtractionParseError("Completion JSON is not an object")
    return payload
