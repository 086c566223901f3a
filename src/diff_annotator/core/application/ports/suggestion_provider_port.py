from abc import ABC, abstractmethod

from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.domain.review.raw_comment import SuggestionsPayload
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform


class SuggestionProviderPort(ABC):
    """One LLM backend able to return a validated suggestions payload."""

    @property
    @abstractmethod
    def platform(self) -> LlmPlatform:
        """Platform identifier, used in errors and logs."""

    @abstractmethod
    async def request_suggestions(self, request: SuggestionRequest) -> SuggestionsPayload:
        """Single attempt. Raises ProviderError subclasses on failure; never retries."""
