from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.domain.review.raw_comment import SuggestionsPayload


@dataclass(frozen=True, slots=True)
class OpenAiRequestMapper:
    def to_structured_kwargs(self, request: SuggestionRequest) -> Mapping[str, Any]:
        return {
            "model": request.model,
            "messages": self._messages(request.system_prompt, request.user_prompt),
            "response_format": SuggestionsPayload,
        }

    def to_json_mode_kwargs(self, request: SuggestionRequest) -> Mapping[str, Any]:
        return {
            "model": request.model,
            "messages": self._messages(request.system_prompt, request.user_prompt_with_format()),
            "response_format": {"type": "json_object"},
        }

    def _messages(self, system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
