"""Unit tests for RequestSuggestionsSkill (zero I/O, AsyncMock for the provider port)."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from diff_annotator.core.application.exceptions import (
    SuggestionRequestFailedError,
    TooManyTokensError,
)
from diff_annotator.core.application.ports.retry_port import RetryPort
from diff_annotator.core.application.skills.review.request_suggestions_skill import (
    RequestSuggestionsInput,
    RequestSuggestionsSkill,
)
from diff_annotator.core.domain.review import SuggestionsPayload
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform
from diff_annotator.infrastructure.common.retry.retry_policy import RetryPolicy


def _provider(*outcomes) -> AsyncMock:
    provider = AsyncMock()
    provider.platform = LlmPlatform.OPENAI
    provider.request_suggestions.side_effect = list(outcomes)
    return provider


def _skill(provider, retries: int = 3, log=None) -> RequestSuggestionsSkill:
    return RequestSuggestionsSkill(
        provider=provider,
        model="gpt-4o-2024-08-06",
        retry=RetryPolicy(retries=retries, sleep=AsyncMock()),
        log=log,
    )


class _SingleAttempt(RetryPort):
    def __init__(self) -> None:
        self.calls = 0

    async def run(self, fn, on_retry=None):
        self.calls += 1
        return await fn()


def _failure() -> SuggestionRequestFailedError:
    return SuggestionRequestFailedError(provider="openai", message="boom", retryable=True)


class TestRequestSuggestionsSkill:
    async def test_builds_request_with_prompts(self, make_raw_comment) -> None:
        payload = SuggestionsPayload(comments_to_add=[])
        provider = _provider(payload)

        result = await _skill(provider).execute(
            RequestSuggestionsInput(raw_comments=[make_raw_comment()], rules="--no var", description="Adds bar")
        )

        assert result is payload
        request = provider.request_suggestions.await_args.args[0]
        assert request.model == "gpt-4o-2024-08-06"
        assert "--no var" in request.user_prompt
        assert '"relativePosition": 3' in request.user_prompt
        assert "Adds bar" in request.user_prompt
        assert request.system_prompt
        assert "commentsToAdd" in request.format_instructions

    async def test_retries_and_logs_through_injected_logger(self, make_raw_comment) -> None:
        payload = SuggestionsPayload(comments_to_add=[])
        provider = _provider(_failure(), payload)
        log = MagicMock(spec=logging.Logger)

        result = await _skill(provider, log=log).execute(RequestSuggestionsInput(raw_comments=[make_raw_comment()]))

        assert result is payload
        assert provider.request_suggestions.await_count == 2
        log.error.assert_called_once()
        assert log.error.call_args.args[1] == 1
        warning_args = log.warning.call_args.args
        assert warning_args[1:] == (1.5, 2)

    async def test_too_many_tokens_is_not_retried(self, make_raw_comment) -> None:
        provider = _provider(TooManyTokensError("openai"), SuggestionsPayload(comments_to_add=[]))

        with pytest.raises(TooManyTokensError):
            await _skill(provider).execute(RequestSuggestionsInput(raw_comments=[make_raw_comment()]))

        assert provider.request_suggestions.await_count == 1

    async def test_last_error_propagates_after_exhaustion(self, make_raw_comment) -> None:
        provider = _provider(_failure(), _failure(), _failure())

        with pytest.raises(SuggestionRequestFailedError):
            await _skill(provider).execute(RequestSuggestionsInput(raw_comments=[make_raw_comment()]))

        assert provider.request_suggestions.await_count == 3

    async def test_any_retry_port_drives_the_request(self, make_raw_comment) -> None:
        payload = SuggestionsPayload(comments_to_add=[])
        provider = _provider(payload)
        retry = _SingleAttempt()
        skill = RequestSuggestionsSkill(provider=provider, model="gpt-4o-2024-08-06", retry=retry)

        assert await skill.execute(RequestSuggestionsInput(raw_comments=[make_raw_comment()])) is payload
        assert retry.calls == 1
