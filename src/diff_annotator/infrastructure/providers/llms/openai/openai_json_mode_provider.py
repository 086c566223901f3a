from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from diff_annotator.core.application.exceptions import (
    ModelRefusalError,
    ProviderError,
    TooManyTokensError,
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
from diff_annotator.infrastructure.providers.llms.shared.payload_parser import parse_payload_text

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class OpenAiJsonModeProvider(SuggestionProviderPort):
    """Free-text JSON mode for models without structured output support.

    The schema travels inside the prompt and the answer is validated here.
    With ``require_suggestions`` an empty answer counts as a refusal.
    """

    client: Any
    backend: LlmPlatform
    request_mapper: OpenAiRequestMapper
    require_suggestions: bool = False

    @property
    def platform(self) -> LlmPlatform:
        return self.backend

    async def request_suggestions(self, request: SuggestionRequest) -> SuggestionsPayload:
        logger.debug("OpenAI JSON mode request", model=request.model, platform=self.backend.value)
        try:
            completion = await self.client.chat.completions.create(
                **self.request_mapper.to_json_mode_kwargs(request)
            )
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self._to_payload(completion)

    def _to_payload(self, completion: Any) -> SuggestionsPayload:
        choice = completion.choices[0]
        if choice.finish_reason == "length":
            raise TooManyTokensError(self.backend.value, "the response hit the model's output limit")
        if getattr(choice.message, "refusal", None):
            raise ModelRefusalError(self.backend.value, choice.message.refusal)
        payload = parse_payload_text(self.backend.value, choice.message.content)
        if self.require_suggestions and not payload.comments_to_add:
            raise ModelRefusalError(self.backend.value, "empty suggestions payload")
        return payload

    def _map_error(self, exc: Exception) -> ProviderError:
        return map_openai_error(self.backend.value, exc)
