from abc import ABC, abstractmethod
from typing import Any

from diff_annotator.core.domain.review.review_comment import ReviewComment


class VcsPort(ABC):
    """Pull request operations against the hosting service."""

    @abstractmethod
    async def get_pull_request_diff(self, pull_number: int) -> str:
        """Returns the pull request as unified diff text."""

    @abstractmethod
    async def get_pull_request(self, pull_number: int) -> dict[str, Any]:
        """Returns the pull request JSON (title, body, ...)."""

    @abstractmethod
    async def list_reviews(self, pull_number: int) -> list[dict[str, Any]]:
        """Returns every review on the pull request."""

    @abstractmethod
    async def list_review_comments(self, pull_number: int, review_id: int) -> list[dict[str, Any]]:
        """Returns every comment attached to one review."""

    @abstractmethod
    async def delete_review_comment(self, comment_id: int) -> None:
        """Deletes one review comment."""

    @abstractmethod
    async def create_review(
        self, pull_number: int, body: str, comments: list[ReviewComment]
    ) -> dict[str, Any]:
        """Creates a COMMENT review with inline comments and returns the created review."""
