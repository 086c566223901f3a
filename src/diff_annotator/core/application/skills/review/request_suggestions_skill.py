import logging
from dataclasses import dataclass

from diff_annotator.core.application.ports.retry_port import RetryNotice, RetryPort
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.application.skills.review.prompt_templates.suggestion_prompt_builder import (
    SuggestionPromptBuilder,
)
from diff_annotator.core.application.skills.skill import BaseSkill
from diff_annotator.core.domain.review.raw_comment import RawComment, SuggestionsPayload

_default_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestSuggestionsInput:
    """Input contract for the suggestion request step."""

    raw_comments: list[RawComment]
    rules: str = ""
    description: str | None = None


class RequestSuggestionsSkill(BaseSkill[RequestSuggestionsInput, SuggestionsPayload]):
    """Asks the configured backend for suggestions, retrying transient failures."""

    def __init__(
        self,
        provider: SuggestionProviderPort,
        model: str,
        retry: RetryPort,
        log: logging.Logger | None = None,
    ) -> None:
        self._provider = provider
        self._model = model
        self._retry = retry
        self._log = log or _default_logger

    async def execute(self, input_data: RequestSuggestionsInput) -> SuggestionsPayload:
        request = SuggestionRequest(
            model=self._model,
            system_prompt=SuggestionPromptBuilder.build_system_prompt(),
            user_prompt=SuggestionPromptBuilder.build_user_prompt(
                input_data.rules, input_data.raw_comments, input_data.description
            ),
            format_instructions=SuggestionPromptBuilder.build_format_instructions(),
        )
        self._log.info(
            "[RequestSuggestions] Generating suggestions using model %s (%s) for %d records",
            self._model,
            self._provider.platform,
            len(input_data.raw_comments),
        )
        payload = await self._retry.run(
            lambda: self._provider.request_suggestions(request), on_retry=self._on_retry
        )
        self._log.info("[RequestSuggestions] Received %d entries", len(payload.comments_to_add))
        return payload

    def _on_retry(self, notice: RetryNotice) -> None:
        self._log.error("[RequestSuggestions] Attempt %d failed: %s.", notice.attempt, notice.error)
        self._log.warning(
            "[RequestSuggestions] Retrying in %.1fs. Remaining attempts: %d.",
            notice.delay,
            notice.remaining_attempts,
        )
