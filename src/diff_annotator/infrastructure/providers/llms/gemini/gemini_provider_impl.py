from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from google.genai import errors, types

from diff_annotator.core.application.exceptions import (
    ModelRefusalError,
    ProviderError,
    SuggestionRequestFailedError,
    TooManyTokensError,
)
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.domain.review.raw_comment import SuggestionsPayload
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform
from diff_annotator.infrastructure.providers.llms.gemini.mappers.gemini_request_mapper import (
    GeminiRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.shared.payload_parser import parse_payload_text

logger = structlog.get_logger()

_REFUSAL_REASONS = frozenset(
    {
        types.FinishReason.SAFETY,
        types.FinishReason.RECITATION,
        types.FinishReason.BLOCKLIST,
        types.FinishReason.PROHIBITED_CONTENT,
    }
)


@dataclass(frozen=True, slots=True)
class GeminiProviderImpl(SuggestionProviderPort):
    client: Any
    request_mapper: GeminiRequestMapper

    @property
    def platform(self) -> LlmPlatform:
        return LlmPlatform.GOOGLE

    async def request_suggestions(self, request: SuggestionRequest) -> SuggestionsPayload:
        logger.debug("Gemini request", model=request.model)
        try:
            response = await self.client.aio.models.generate_content(**self.request_mapper.to_kwargs(request))
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self._to_payload(response)

    def _to_payload(self, response: Any) -> SuggestionsPayload:
        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and feedback.block_reason:
            raise ModelRefusalError(self.platform.value, f"prompt blocked ({feedback.block_reason})")
        candidates = response.candidates or []
        reason = candidates[0].finish_reason if candidates else None
        if reason == types.FinishReason.MAX_TOKENS:
            raise TooManyTokensError(self.platform.value, "the response hit max_output_tokens")
        if reason in _REFUSAL_REASONS:
            raise ModelRefusalError(self.platform.value, f"finish_reason={reason}")
        return parse_payload_text(self.platform.value, response.text)

    def _map_error(self, exc: Exception) -> ProviderError:
        provider = self.platform.value
        if isinstance(exc, errors.APIError):
            code = exc.code if isinstance(exc.code, int) else None
            retryable = code is None or code in (408, 429) or code >= 500
            return SuggestionRequestFailedError(
                provider=provider, message=str(exc), retryable=retryable, status_code=code
            )
        return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True)
