import re

import structlog

from diff_annotator.core.application.exceptions import UnsupportedBackendError
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform
from diff_annotator.infrastructure.providers.llms.anthropic.anthropic_provider_impl import (
    AnthropicProviderImpl,
)
from diff_annotator.infrastructure.providers.llms.anthropic.clients.anthropic_client_factory import (
    AnthropicClientFactory,
)
from diff_annotator.infrastructure.providers.llms.anthropic.clients.anthropic_config import (
    AnthropicConfig,
)
from diff_annotator.infrastructure.providers.llms.anthropic.mappers.anthropic_request_mapper import (
    AnthropicRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.gemini.clients.gemini_client_factory import (
    GeminiClientFactory,
)
from diff_annotator.infrastructure.providers.llms.gemini.clients.gemini_config import GeminiConfig
from diff_annotator.infrastructure.providers.llms.gemini.gemini_provider_impl import (
    GeminiProviderImpl,
)
from diff_annotator.infrastructure.providers.llms.gemini.mappers.gemini_request_mapper import (
    GeminiRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.openai.clients.openai_client_factory import (
    OpenAiClientFactory,
)
from diff_annotator.infrastructure.providers.llms.openai.clients.openai_config import OpenAiConfig
from diff_annotator.infrastructure.providers.llms.openai.mappers.openai_request_mapper import (
    OpenAiRequestMapper,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_json_mode_provider import (
    OpenAiJsonModeProvider,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_structured_provider import (
    OpenAiStructuredProvider,
)

logger = structlog.get_logger()

_JSON_MODE_MODELS = re.compile(r"deepseek", re.IGNORECASE)


def uses_json_mode(model: str) -> bool:
    """DeepSeek models have no structured output support and fall back to JSON mode."""
    return bool(_JSON_MODE_MODELS.search(model))


class LlmProviderFactory:
    """Builds the suggestion backend for a platform identifier, once per run."""

    @staticmethod
    def resolve_platform(platform: str) -> LlmPlatform:
        try:
            return LlmPlatform(platform)
        except ValueError:
            raise UnsupportedBackendError(platform) from None

    @classmethod
    def create(cls, platform: str, api_key: str, model: str) -> SuggestionProviderPort:
        resolved = cls.resolve_platform(platform)
        logger.info("Initializing AI model...", platform=resolved.value, model=model)
        if resolved is LlmPlatform.ANTHROPIC:
            client = AnthropicClientFactory(AnthropicConfig(api_key=api_key)).create()
            return AnthropicProviderImpl(client=client, request_mapper=AnthropicRequestMapper())
        if resolved is LlmPlatform.GOOGLE:
            client = GeminiClientFactory(GeminiConfig(api_key=api_key)).create()
            return GeminiProviderImpl(client=client, request_mapper=GeminiRequestMapper())
        return cls._create_openai_compatible(resolved, api_key, model)

    @staticmethod
    def _create_openai_compatible(platform: LlmPlatform, api_key: str, model: str) -> SuggestionProviderPort:
        client = OpenAiClientFactory(OpenAiConfig(api_key=api_key, base_url=platform.base_url)).create()
        mapper = OpenAiRequestMapper()
        if platform is LlmPlatform.MISTRAL:
            return OpenAiJsonModeProvider(
                client=client, backend=platform, request_mapper=mapper, require_suggestions=True
            )
        if uses_json_mode(model):
            return OpenAiJsonModeProvider(client=client, backend=platform, request_mapper=mapper)
        return OpenAiStructuredProvider(client=client, backend=platform, request_mapper=mapper)
