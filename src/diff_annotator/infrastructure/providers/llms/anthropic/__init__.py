from diff_annotator.infrastructure.providers.llms.anthropic.anthropic_provider_impl import (
    AnthropicProviderImpl,
)

__all__ = ["AnthropicProviderImpl"]
