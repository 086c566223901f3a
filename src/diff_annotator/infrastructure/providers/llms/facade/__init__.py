from diff_annotator.infrastructure.providers.llms.facade.llm_provider_factory import (
    LlmProviderFactory,
    uses_json_mode,
)

__all__ = ["LlmProviderFactory", "uses_json_mode"]
