from enum import StrEnum, auto


class LlmPlatform(StrEnum):
    OPENAI = auto()
    ANTHROPIC = auto()
    MISTRAL = auto()
    OPENROUTER = auto()
    GOOGLE = auto()

    @property
    def default_model(self) -> str:
        return DEFAULT_MODEL_BY_PLATFORM[self]

    @property
    def base_url(self) -> str | None:
        return BASE_URL_BY_PLATFORM.get(self)

    def resolve_model(self, name: str) -> str:
        """An empty model name means the platform default."""
        return name.strip() or self.default_model


DEFAULT_MODEL_BY_PLATFORM: dict[LlmPlatform, str] = {
    LlmPlatform.OPENAI: "gpt-4o-2024-08-06",
    LlmPlatform.ANTHROPIC: "claude-3-7-sonnet-latest",
    LlmPlatform.MISTRAL: "pixtral-12b-2409",
    LlmPlatform.OPENROUTER: "deepseek/deepseek-r1",
    LlmPlatform.GOOGLE: "gemini-2.5-pro-preview-06-05",
}

BASE_URL_BY_PLATFORM: dict[LlmPlatform, str] = {
    LlmPlatform.MISTRAL: "https://api.mistral.ai/v1",
    LlmPlatform.OPENROUTER: "https://openrouter.ai/api/v1",
}
