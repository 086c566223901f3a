from diff_annotator.core.domain.review.raw_comment import (
    ChangePayload,
    RawComment,
    SuggestedComment,
    SuggestionsPayload,
    dump_raw_comments,
)
from diff_annotator.core.domain.review.review_comment import ReviewComment
from diff_annotator.core.domain.review.run_summary import RunSummary
from diff_annotator.core.domain.review.suggestion_reconciler import reconcile

__all__ = [
    "ChangePayload",
    "RawComment",
    "ReviewComment",
    "RunSummary",
    "SuggestedComment",
    "SuggestionsPayload",
    "dump_raw_comments",
    "reconcile",
]
