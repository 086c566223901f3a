from dataclasses import dataclass, field
from typing import Any

from diff_annotator.core.domain.review.raw_comment import RawComment
from diff_annotator.core.domain.review.review_comment import ReviewComment


@dataclass(frozen=True)
class RunSummary:
    """Machine-readable outcome of one run."""

    review: dict[str, Any] | None = None
    suggestions: list[ReviewComment] = field(default_factory=list)
    raw_comments: list[RawComment] = field(default_factory=list)

    @property
    def published(self) -> bool:
        return self.review is not None
