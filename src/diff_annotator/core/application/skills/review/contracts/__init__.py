from diff_annotator.core.application.skills.review.contracts.suggestion_request import (
    SuggestionRequest,
)

__all__ = ["SuggestionRequest"]
