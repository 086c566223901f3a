"""Unit tests for the OpenAI-compatible providers (zero I/O, AsyncMock SDK client)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from diff_annotator.core.application.exceptions import (
    MalformedModelOutputError,
    ModelRefusalError,
    SuggestionRequestFailedError,
    TooManyTokensError,
)
from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)
from diff_annotator.core.domain.review import SuggestionsPayload
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform
from diff_annotator.infrastructure.providers.llms.openai.mappers.openai_request_mapper import (
    OpenAiRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_error_mapper import map_openai_error
from diff_annotator.infrastructure.providers.llms.openai.openai_json_mode_provider import (
    OpenAiJsonModeProvider,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_structured_provider import (
    OpenAiStructuredProvider,
)

VALID_JSON = (
    '{"commentsToAdd": [{"path": "a.js", "position": 3, "line": 5, "suggestions": "use const", '
    '"change": {"type": "add", "add": true, "ln": 5, "content": "+bar();", "relativePosition": 3}}]}'
)


def _request() -> SuggestionRequest:
    return SuggestionRequest(
        model="deepseek/deepseek-r1", system_prompt="sys", user_prompt="user", format_instructions="schema"
    )


def _completion(*, content=None, parsed=None, refusal=None, finish_reason="stop") -> SimpleNamespace:
    message = SimpleNamespace(content=content, parsed=parsed, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason=finish_reason)])


def _client(completion=None, error=None) -> MagicMock:
    client = MagicMock()
    client.chat.completions.parse = AsyncMock(return_value=completion, side_effect=error)
    client.chat.completions.create = AsyncMock(return_value=completion, side_effect=error)
    return client


def _status_error(cls, status: int):
    response = httpx.Response(status, request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
    return cls("upstream said no", response=response, body=None)


class TestOpenAiStructuredProvider:
    async def test_returns_parsed_payload(self) -> None:
        payload = SuggestionsPayload(comments_to_add=[])
        client = _client(_completion(parsed=payload))
        provider = OpenAiStructuredProvider(client, LlmPlatform.OPENAI, OpenAiRequestMapper())

        assert await provider.request_suggestions(_request()) is payload
        kwargs = client.chat.completions.parse.await_args.kwargs
        assert kwargs["response_format"] is SuggestionsPayload
        assert kwargs["messages"][0] == {"role": "system", "content": "sys"}

    async def test_refusal_is_not_retryable(self) -> None:
        provider = OpenAiStructuredProvider(
            _client(_completion(refusal="I can't help with that")), LlmPlatform.OPENAI, OpenAiRequestMapper()
        )

        with pytest.raises(ModelRefusalError) as exc_info:
            await provider.request_suggestions(_request())

        assert not exc_info.value.retryable

    async def test_missing_parse_is_malformed(self) -> None:
        provider = OpenAiStructuredProvider(_client(_completion()), LlmPlatform.OPENAI, OpenAiRequestMapper())

        with pytest.raises(MalformedModelOutputError):
            await provider.request_suggestions(_request())

    async def test_sdk_errors_are_mapped(self) -> None:
        error = _status_error(openai.InternalServerError, 503)
        provider = OpenAiStructuredProvider(_client(error=error), LlmPlatform.OPENAI, OpenAiRequestMapper())

        with pytest.raises(SuggestionRequestFailedError) as exc_info:
            await provider.request_suggestions(_request())

        assert exc_info.value.retryable
        assert exc_info.value.status_code == 503
        assert exc_info.value.__cause__ is error


class TestOpenAiJsonModeProvider:
    async def test_parses_fenced_json_and_sends_schema_in_prompt(self) -> None:
        client = _client(_completion(content=f"```json\n{VALID_JSON}\n```"))
        provider = OpenAiJsonModeProvider(client, LlmPlatform.OPENROUTER, OpenAiRequestMapper())

        payload = await provider.request_suggestions(_request())

        assert payload.comments_to_add[0].suggestions == "use const"
        kwargs = client.chat.completions.create.await_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][1]["content"].endswith("schema")

    async def test_invalid_json_is_malformed_and_retryable(self) -> None:
        provider = OpenAiJsonModeProvider(
            _client(_completion(content='{"commentsToAdd": [')), LlmPlatform.OPENROUTER, OpenAiRequestMapper()
        )

        with pytest.raises(MalformedModelOutputError) as exc_info:
            await provider.request_suggestions(_request())

        assert exc_info.value.retryable

    async def test_length_finish_is_too_many_tokens(self) -> None:
        provider = OpenAiJsonModeProvider(
            _client(_completion(content="{", finish_reason="length")), LlmPlatform.OPENROUTER, OpenAiRequestMapper()
        )

        with pytest.raises(TooManyTokensError):
            await provider.request_suggestions(_request())

    async def test_empty_payload_is_refusal_when_suggestions_required(self) -> None:
        client = _client(_completion(content='{"commentsToAdd": []}'))
        strict = OpenAiJsonModeProvider(client, LlmPlatform.MISTRAL, OpenAiRequestMapper(), require_suggestions=True)
        lenient = OpenAiJsonModeProvider(client, LlmPlatform.OPENROUTER, OpenAiRequestMapper())

        with pytest.raises(ModelRefusalError):
            await strict.request_suggestions(_request())
        assert (await lenient.request_suggestions(_request())).comments_to_add == []


class TestMapOpenAiError:
    @pytest.mark.parametrize(
        ("cls", "status", "retryable"),
        [
            (openai.RateLimitError, 429, True),
            (openai.AuthenticationError, 401, False),
            (openai.BadRequestError, 400, False),
            (openai.InternalServerError, 500, True),
        ],
    )
    def test_status_errors(self, cls, status: int, retryable: bool) -> None:
        mapped = map_openai_error("openai", _status_error(cls, status))

        assert mapped.retryable is retryable
        assert mapped.status_code == status

    def test_connection_error_is_retryable(self) -> None:
        error = openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1"))

        assert map_openai_error("openai", error).retryable
