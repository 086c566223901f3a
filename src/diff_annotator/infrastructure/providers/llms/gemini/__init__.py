from diff_annotator.infrastructure.providers.llms.gemini.gemini_provider_impl import GeminiProviderImpl

__all__ = ["GeminiProviderImpl"]
