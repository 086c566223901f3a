from __future__ import annotations

import openai

from diff_annotator.core.application.exceptions import (
    ModelRefusalError,
    ProviderError,
    SuggestionRequestFailedError,
    TooManyTokensError,
)


def map_openai_error(provider: str, exc: Exception) -> ProviderError:
    if isinstance(exc, openai.LengthFinishReasonError):
        return TooManyTokensError(provider, "the response hit the model's output limit")
    if isinstance(exc, openai.ContentFilterFinishReasonError):
        return ModelRefusalError(provider, "the response was stopped by the content filter")
    if isinstance(exc, openai.RateLimitError):
        return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True, status_code=429)
    if isinstance(exc, openai.APIConnectionError):
        return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True)
    if isinstance(exc, openai.AuthenticationError):
        return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=False, status_code=401)
    if isinstance(exc, openai.APIStatusError):
        return _map_status_error(provider, exc)
    return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=True)


def _map_status_error(provider: str, exc: openai.APIStatusError) -> ProviderError:
    code = exc.status_code
    retryable = bool(code == 429 or code >= 500)
    return SuggestionRequestFailedError(provider=provider, message=str(exc), retryable=retryable, status_code=code)
