from diff_annotator.core.application.skills.review.prompt_templates.suggestion_prompt_builder import (
    SuggestionPromptBuilder,
)

__all__ = ["SuggestionPromptBuilder"]
