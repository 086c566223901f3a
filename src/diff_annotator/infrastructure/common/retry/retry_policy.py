from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from diff_annotator.core.application.exceptions.provider_error import ProviderError
from diff_annotator.core.application.ports.retry_port import OnRetry, RetryNotice, RetryPort

_T = TypeVar("_T")

DEFAULT_NON_RETRYABLE_MARKERS: tuple[str, ...] = ("Unsupported AI platform", "Too many tokens")


@dataclass(frozen=True)
class RetryPolicy(RetryPort):
    """Exponential backoff without jitter: 1.5s, 3s, 6s, capped at 10s.

    ``retries`` is the total number of attempts; 0 means a single direct call.
    Errors whose message contains one of ``non_retryable_markers`` (any case),
    and provider errors flagged as non-retryable, propagate on first failure.
    """

    retries: int = 3
    initial_delay: float = 1.5
    backoff_factor: float = 2.0
    max_delay: float = 10.0
    non_retryable_markers: tuple[str, ...] = DEFAULT_NON_RETRYABLE_MARKERS
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    async def run(self, fn: Callable[[], Awaitable[_T]], on_retry: OnRetry | None = None) -> _T:
        if self.retries <= 0:
            return await fn()
        return await self._retrying(on_retry)(fn)

    def is_retryable(self, exc: BaseException) -> bool:
        text = str(exc).lower()
        if any(marker.lower() in text for marker in self.non_retryable_markers):
            return False
        if isinstance(exc, ProviderError):
            return exc.retryable
        return True

    def _retrying(self, on_retry: OnRetry | None) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(self.is_retryable),
            stop=stop_after_attempt(self.retries),
            wait=wait_exponential(
                multiplier=self.initial_delay, exp_base=self.backoff_factor, max=self.max_delay
            ),
            before_sleep=self._notifier(on_retry),
            sleep=self.sleep,
            reraise=True,
        )

    def _notifier(self, on_retry: OnRetry | None) -> Callable[[RetryCallState], None] | None:
        if on_retry is None:
            return None

        def notify(state: RetryCallState) -> None:
            on_retry(
                RetryNotice(
                    error=state.outcome.exception(),
                    attempt=state.attempt_number,
                    remaining_attempts=self.retries - state.attempt_number,
                    delay=state.next_action.sleep if state.next_action else 0.0,
                )
            )

        return notify
