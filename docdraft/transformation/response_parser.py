"""Strict-parse-then-fallback handling for model responses.

Models are asked for JSON but sometimes answer with prose or wrap the JSON in
Markdown code fences. ``parse_structured`` never raises: it returns either a
``StructuredResponse`` with the decoded object or a ``FallbackResponse``
carrying the raw text and the reason parsing failed.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from docdraft.transformation.exceptions import ResponseFormatError


@dataclass(frozen=True)
class StructuredResponse:
    data: dict[str, Any]


@dataclass(frozen=True)
class FallbackResponse:
    raw_text: str
    reason: str


ParsedResponse = StructuredResponse | FallbackResponse


def strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned


def load_json_object(raw: str, required: Iterable[str] = ()) -> dict[str, Any]:
    """Decode *raw* as a JSON object holding every *required* string field.

    Raises:
        ResponseFormatError: if the text is not a JSON object, or a required
            field is missing or not a non-empty string.
    """
    try:
        parsed = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as exc:
        raise ResponseFormatError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ResponseFormatError("JSON response must be an object")
    for name in required:
        value = parsed.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ResponseFormatError(f"'{name}' must be a non-empty string")
    return parsed


def parse_structured(raw: str, required: Iterable[str] = ()) -> ParsedResponse:
    try:
        return StructuredResponse(data=load_json_object(raw, required))
    except ResponseFormatError as exc:
        return FallbackResponse(raw_text=raw, reason=str(exc))


def string_field(data: dict[str, Any], name: str) -> str:
    """Return a stripped string field, or "" when absent or mistyped."""
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ""


def tags_field(data: dict[str, Any], name: str = "tags") -> list[str]:
    """Return the non-blank string entries of a list field."""
    value = data.get(name)
    if not isinstance(value, list):
        return []
    return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]
