import json
import logging
from dataclasses import dataclass
from typing import Any

from diff_annotator.core.application.exceptions import PublishFailedError
from diff_annotator.core.application.ports.vcs_port import VcsPort
from diff_annotator.core.application.skills.skill import BaseSkill
from diff_annotator.core.domain.review.review_comment import ReviewComment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishReviewInput:
    """Input contract for the review publish step."""

    pull_number: int
    model_name: str
    comments: list[ReviewComment]


class PublishReviewSkill(BaseSkill[PublishReviewInput, dict[str, Any]]):
    """Posts one COMMENT review carrying every inline comment."""

    def __init__(self, vcs: VcsPort) -> None:
        self._vcs = vcs

    async def execute(self, input_data: PublishReviewInput) -> dict[str, Any]:
        logger.info(
            "[PublishReview] Adding %d review comments to PR #%d",
            len(input_data.comments),
            input_data.pull_number,
        )
        try:
            review = await self._vcs.create_review(
                input_data.pull_number,
                f"Code Review by {input_data.model_name}",
                input_data.comments,
            )
        except Exception as exc:
            payload = json.dumps([comment.to_api() for comment in input_data.comments], indent=2)
            logger.info("[PublishReview] Failed to add review comments: %s", payload)
            raise PublishFailedError(
                f"Failed to create review: {exc}",
                context={"pull_number": input_data.pull_number, "comments": len(input_data.comments)},
            ) from exc
        logger.info("[PublishReview] Review %s created", review.get("id"))
        return review
