"""Turns a model answer into publishable comments.

Only suggestions anchored to a ``(path, line)`` pair the diff actually
produced survive; the model may hallucinate or shift anchors.
"""

from collections.abc import Iterable

import structlog

from diff_annotator.core.domain.review.raw_comment import RawComment, SuggestionsPayload
from diff_annotator.core.domain.review.review_comment import ReviewComment

logger = structlog.get_logger()


def reconcile(payload: SuggestionsPayload, raw_comments: Iterable[RawComment]) -> list[ReviewComment]:
    anchors = {comment.anchor for comment in raw_comments}
    comments: list[ReviewComment] = []
    for suggested in payload.comments_to_add:
        if not suggested.has_suggestion:
            continue
        if suggested.anchor not in anchors:
            logger.warning(
                "Dropping suggestion anchored outside the diff",
                path=suggested.path,
                line=suggested.line,
            )
            continue
        comments.append(ReviewComment(path=suggested.path, line=suggested.line, body=suggested.suggestions))
    return comments
