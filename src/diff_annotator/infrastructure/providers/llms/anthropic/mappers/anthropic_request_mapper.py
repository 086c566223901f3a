from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.infrastructure.providers.llms.shared.payload_parser import response_json_schema

STRUCTURED_OUTPUT_TOOL = "structuredOutput"


@dataclass(frozen=True, slots=True)
class AnthropicRequestMapper:
    """Forces a single tool call whose input schema is the suggestions payload."""

    max_tokens: int = 8192

    def to_kwargs(self, request: SuggestionRequest) -> Mapping[str, Any]:
        return {
            "model": request.model,
            "max_tokens": self.max_tokens,
            "system": request.system_prompt,
            "tools": [
                {
                    "name": STRUCTURED_OUTPUT_TOOL,
                    "description": "Structured Output",
                    "input_schema": response_json_schema(),
                }
            ],
            "tool_choice": {"type": "tool", "name": STRUCTURED_OUTPUT_TOOL},
            "messages": [{"role": "user", "content": request.user_prompt}],
        }
