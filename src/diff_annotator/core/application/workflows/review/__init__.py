from diff_annotator.core.application.workflows.review.diff_review_workflow import (
    DiffReviewWorkflow,
    ReviewOptions,
)

__all__ = ["DiffReviewWorkflow", "ReviewOptions"]
