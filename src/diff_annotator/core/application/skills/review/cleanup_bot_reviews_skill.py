import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from diff_annotator.core.application.ports.vcs_port import VcsPort
from diff_annotator.core.application.skills.skill import BaseSkill

logger = logging.getLogger(__name__)

# The Actions bot identity cannot be renamed, so matching on it is stable
BOT_LOGIN = "github-actions[bot]"
BOT_USER_TYPE = "Bot"


def is_bot_review(review: dict[str, Any]) -> bool:
    user = review.get("user") or {}
    return user.get("login") == BOT_LOGIN or user.get("type") == BOT_USER_TYPE


@dataclass(frozen=True)
class CleanupBotReviewsInput:
    pull_number: int


class CleanupBotReviewsSkill(BaseSkill[CleanupBotReviewsInput, int]):
    """Deletes every inline comment of earlier bot-authored reviews.

    Deletes run one at a time with a pause after each to stay under the
    secondary rate limit. Returns the number of deleted comments.
    """

    def __init__(
        self,
        vcs: VcsPort,
        pause_s: float = 1.5,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._vcs = vcs
        self._pause_s = pause_s
        self._sleep = sleep

    async def execute(self, input_data: CleanupBotReviewsInput) -> int:
        logger.info("[CleanupBotReviews] Fetching pull request reviews...")
        reviews = await self._vcs.list_reviews(input_data.pull_number)
        bot_reviews = [review for review in reviews if is_bot_review(review)]
        if not bot_reviews:
            logger.warning("[CleanupBotReviews] No reviews by bot found, nothing to delete")
            return 0

        logger.info("[CleanupBotReviews] Found %d reviews by bot", len(bot_reviews))
        logger.warning("[CleanupBotReviews] Deleting existing comments for all reviews by bot...")
        deleted = 0
        for review in bot_reviews:
            comments = await self._vcs.list_review_comments(input_data.pull_number, review["id"])
            for comment in comments:
                await self._vcs.delete_review_comment(comment["id"])
                deleted += 1
                await self._sleep(self._pause_s)
        logger.info("[CleanupBotReviews] Deleted %d comments", deleted)
        return deleted
