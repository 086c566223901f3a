"""Validation of model output against the suggestions schema."""

import json
import re
from typing import Any

from pydantic import ValidationError

from diff_annotator.core.application.exceptions import MalformedModelOutputError
from diff_annotator.core.domain.review.raw_comment import SuggestionsPayload

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def parse_payload_text(provider: str, text: str | None) -> SuggestionsPayload:
    if not text or not text.strip():
        raise MalformedModelOutputError(provider, "empty response")
    cleaned = text.strip()
    fenced = _FENCE.match(cleaned)
    if fenced:
        cleaned = fenced.group(1)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedModelOutputError(provider, f"invalid JSON ({exc.msg} at {exc.pos})") from exc
    return parse_payload_data(provider, data)


def parse_payload_data(provider: str, data: Any) -> SuggestionsPayload:
    try:
        return SuggestionsPayload.model_validate(data)
    except ValidationError as exc:
        raise MalformedModelOutputError(provider, f"{exc.error_count()} validation errors") from exc


def response_json_schema() -> dict[str, Any]:
    return SuggestionsPayload.model_json_schema(by_alias=True)
