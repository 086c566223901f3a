from diff_annotator.infrastructure.providers.llms.openai.openai_json_mode_provider import (
    OpenAiJsonModeProvider,
)
from diff_annotator.infrastructure.providers.llms.openai.openai_structured_provider import (
    OpenAiStructuredProvider,
)

__all__ = ["OpenAiJsonModeProvider", "OpenAiStructuredProvider"]
