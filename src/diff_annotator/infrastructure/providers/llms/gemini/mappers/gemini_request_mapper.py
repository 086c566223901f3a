from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from google.genai import types

from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.infrastructure.providers.llms.shared.payload_parser import response_json_schema


@dataclass(frozen=True, slots=True)
class GeminiRequestMapper:
    def to_kwargs(self, request: SuggestionRequest) -> Mapping[str, Any]:
        return {
            "model": request.model,
            "contents": request.user_prompt,
            "config": types.GenerateContentConfig(
                system_instruction=request.system_prompt,
                response_mime_type="application/json",
                response_json_schema=response_json_schema(),
            ),
        }
