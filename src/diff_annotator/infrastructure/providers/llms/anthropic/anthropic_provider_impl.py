from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import anthropic
import structlog

from diff_annotator.core.application.exceptions import (
    MalformedModelOutputError,
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
from diff_annotator.infrastructure.providers.llms.anthropic.mappers.anthropic_request_mapper import (
    AnthropicRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.shared.payload_parser import parse_payload_data

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class AnthropicProviderImpl(SuggestionProviderPort):
    client: Any
    request_mapper: AnthropicRequestMapper

    @property
    def platform(self) -> LlmPlatform:
        return LlmPlatform.ANTHROPIC

    async def request_suggestions(self, request: SuggestionRequest) -> SuggestionsPayload:
        logger.debug("Anthropic request", model=request.model)
        try:
            message = await self.client.messages.create(**self.request_mapper.to_kwargs(request))
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self._to_payload(message)

    def _to_payload(self, message: Any) -> SuggestionsPayload:
        if message.stop_reason == "max_tokens":
            raise TooManyTokensError(self.platform.value, "the response hit max_tokens")
        if message.stop_reason == "refusal":
            raise ModelRefusalError(self.platform.value, "stop_reason=refusal")
        for block in message.content:
            if block.type == "tool_use":
                return parse_payload_data(self.platform.value, block.input)
        raise MalformedModelOutputError(self.platform.value, "no tool_use block in the response")

    def _map_error(self, exc: Exception) -> ProviderError:
        provider = self.platform.value
        if isinstance(exc, anthropic.RateLimitError):
            return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True, status_code=429)
        if isinstance(exc, anthropic.APIConnectionError):
            return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True)
        if isinstance(exc, anthropic.AuthenticationError):
            return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=False, status_code=401)
        if isinstance(exc, anthropic.APIStatusError):
            return self._map_status_error(exc)
        return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True)

    def _map_status_error(self, exc: anthropic.APIStatusError) -> ProviderError:
        code = exc.status_code
        # 529 is Anthropic's "overloaded"
        retryable = bool(code == 429 or code >= 500)
        return SuggestionRequestFailedError(
            provider=self.platform.value, message=str(exc), retryable=retryable, status_code=code
        )
