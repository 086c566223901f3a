from dataclasses import dataclass


@dataclass(eq=False)
class ProviderError(Exception):
    """Failure reported by a suggestion backend."""

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"


class SuggestionRequestFailedError(ProviderError):
    """Transport or API error while asking for suggestions."""


class ModelRefusalError(ProviderError):
    def __init__(self, provider: str, detail: str) -> None:
        super().__init__(
            provider=provider,
            message=f"the model refused to generate suggestions - {detail}",
            retryable=False,
        )


class TooManyTokensError(ProviderError):
    def __init__(self, provider: str, detail: str = "") -> None:
        suffix = f": {detail}" if detail else ""
        super().__init__(provider=provider, message=f"Too many tokens{suffix}", retryable=False)


class MalformedModelOutputError(ProviderError):
    def __init__(self, provider: str, detail: str) -> None:
        super().__init__(
            provider=provider,
            message=f"model output does not match the response schema - {detail}",
            retryable=True,
        )


class UnsupportedBackendError(ProviderError):
    def __init__(self, platform: str) -> None:
        super().__init__(
            provider=platform,
            message=f"Unsupported AI platform: {platform}",
            retryable=False,
        )
