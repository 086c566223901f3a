from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from diff_annotator.core.application.exceptions import (
    MalformedModelOutputError,
    ModelRefusalError,
    ProviderError,
)
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.domain.review.raw_comment import SuggestionsPayload
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform
from diff_annotator.infrastructure.providers.llms.openai.mappers.openai_request_mapper import (
    OpenAiRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_error_mapper import map_openai_error

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class OpenAiStructuredProvider(SuggestionProviderPort):
    """Schema-constrained output through ``chat.completions.parse``."""

    client: Any
    backend: LlmPlatform
    request_mapper: OpenAiRequestMapper

    @property
    def platform(self) -> LlmPlatform:
        return self.backend

    async def request_suggestions(self, request: SuggestionRequest) -> SuggestionsPayload:
        logger.debug("OpenAI structured request", model=request.model, platform=self.backend.value)
        try:
            completion = await self.client.chat.completions.parse(
                **self.request_mapper.to_structured_kwargs(request)
            )
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self._to_payload(completion)

    def _to_payload(self, completion: Any) -> SuggestionsPayload:
        message = completion.choices[0].message
        if getattr(message, "refusal", None):
            raise ModelRefusalError(self.backend.value, message.refusal)
        if message.parsed is None:
            raise MalformedModelOutputError(self.backend.value, "no parsed payload in the response")
        return message.parsed

    def _map_error(self, exc: Exception) -> ProviderError:
        return map_openai_error(self.backend.value, exc)
