from typing import Any

from diff_annotator.core.application.ports.vcs_port import VcsPort
from diff_annotator.core.domain.review.review_comment import ReviewComment
from diff_annotator.infrastructure.tools.vcs.github.github_http_client import (
    DIFF_ACCEPT,
    RAW_JSON_ACCEPT,
    GitHubHttpClient,
)


class GitHubVcsProvider(VcsPort):
    def __init__(self, client: GitHubHttpClient, owner: str, repo: str) -> None:
        self._client = client
        self._repo_path = f"/repos/{owner}/{repo}"

    async def get_pull_request_diff(self, pull_number: int) -> str:
        return await self._client.get_text(f"{self._repo_path}/pulls/{pull_number}", accept=DIFF_ACCEPT)

    async def get_pull_request(self, pull_number: int) -> dict[str, Any]:
        return await self._client.get_json(f"{self._repo_path}/pulls/{pull_number}", accept=RAW_JSON_ACCEPT)

    async def list_reviews(self, pull_number: int) -> list[dict[str, Any]]:
        return await self._client.get_paginated(f"{self._repo_path}/pulls/{pull_number}/reviews")

    async def list_review_comments(self, pull_number: int, review_id: int) -> list[dict[str, Any]]:
        return await self._client.get_paginated(
            f"{self._repo_path}/pulls/{pull_number}/reviews/{review_id}/comments"
        )

    async def delete_review_comment(self, comment_id: int) -> None:
        await self._client.delete(f"{self._repo_path}/pulls/comments/{comment_id}")

    async def create_review(
        self, pull_number: int, body: str, comments: list[ReviewComment]
    ) -> dict[str, Any]:
        payload = {
            "body": body,
            "event": "COMMENT",
            "comments": [comment.to_api() for comment in comments],
        }
        return await self._client.post_json(f"{self._repo_path}/pulls/{pull_number}/reviews", payload)
