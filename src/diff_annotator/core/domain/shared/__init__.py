from diff_annotator.core.domain.shared.llm_platform import LlmPlatform

__all__ = ["LlmPlatform"]
