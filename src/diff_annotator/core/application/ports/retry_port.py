from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class RetryNotice:
    """Sent before each backoff wait."""

    error: BaseException
    attempt: int
    remaining_attempts: int
    delay: float


OnRetry = Callable[[RetryNotice], None]


class RetryPort(ABC):
    """Runs an async call under a retry strategy."""

    @abstractmethod
    async def run(self, fn: Callable[[], Awaitable[_T]], on_retry: OnRetry | None = None) -> _T:
        """Returns the first successful result; the last error propagates once attempts run out."""
