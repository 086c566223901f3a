"""Unit tests for GitHubVcsProvider over GitHubHttpClient (respx-mocked HTTP)."""

import json

import httpx
import pytest
import respx

from diff_annotator.core.domain.review import ReviewComment
from diff_annotator.infrastructure.tools.vcs.github.github_http_client import (
    GitHubApiError,
    GitHubHttpClient,
)
from diff_annotator.infrastructure.tools.vcs.github.github_vcs_provider import GitHubVcsProvider

API = "https://api.github.com"
REPO = f"{API}/repos/octo/repo"


@pytest.fixture
async def vcs():
    async with GitHubHttpClient("ghs_test", base_url=API) as client:
        yield GitHubVcsProvider(client, "octo", "repo")


class TestGitHubVcsProvider:
    @respx.mock
    async def test_diff_is_requested_with_diff_media_type(self, vcs, replacement_diff) -> None:
        route = respx.get(f"{REPO}/pulls/7").respond(200, text=replacement_diff)

        diff_text = await vcs.get_pull_request_diff(7)

        assert diff_text == replacement_diff
        request = route.calls.last.request
        assert request.headers["Accept"] == "application/vnd.github.diff"
        assert request.headers["Authorization"] == "Bearer ghs_test"
        assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"

    @respx.mock
    async def test_pull_request_body_is_read(self, vcs) -> None:
        respx.get(f"{REPO}/pulls/7").respond(200, json={"number": 7, "body": "Adds bar"})

        pull_request = await vcs.get_pull_request(7)

        assert pull_request["body"] == "Adds bar"

    @respx.mock
    async def test_reviews_follow_next_links(self, vcs) -> None:
        route = respx.get(f"{REPO}/pulls/7/reviews").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json=[{"id": 1}],
                    headers={"Link": f'<{REPO}/pulls/7/reviews?per_page=100&page=2>; rel="next"'},
                ),
                httpx.Response(200, json=[{"id": 2}]),
            ]
        )

        reviews = await vcs.list_reviews(7)

        assert reviews == [{"id": 1}, {"id": 2}]
        assert route.call_count == 2
        assert route.calls[0].request.url.params["per_page"] == "100"
        assert route.calls[1].request.url.params["page"] == "2"

    @respx.mock
    async def test_review_comments_and_delete(self, vcs) -> None:
        respx.get(f"{REPO}/pulls/7/reviews/3/comments").respond(200, json=[{"id": 30}])
        delete_route = respx.delete(f"{REPO}/pulls/comments/30").respond(204)

        comments = await vcs.list_review_comments(7, 3)
        await vcs.delete_review_comment(comments[0]["id"])

        assert delete_route.called

    @respx.mock
    async def test_create_review_posts_comment_event(self, vcs) -> None:
        route = respx.post(f"{REPO}/pulls/7/reviews").respond(200, json={"id": 99})

        review = await vcs.create_review(
            7, "Code Review by gpt-4o", [ReviewComment(path="a.js", line=5, body="use const")]
        )

        assert review == {"id": 99}
        assert json.loads(route.calls.last.request.content) == {
            "body": "Code Review by gpt-4o",
            "event": "COMMENT",
            "comments": [{"path": "a.js", "line": 5, "body": "use const"}],
        }

    @respx.mock
    async def test_error_status_raises_with_detail(self, vcs) -> None:
        respx.post(f"{REPO}/pulls/7/reviews").respond(422, json={"message": "Unprocessable Entity"})

        with pytest.raises(GitHubApiError) as exc_info:
            await vcs.create_review(7, "body", [])

        assert exc_info.value.status_code == 422
        assert exc_info.value.detail == {"message": "Unprocessable Entity"}

    @respx.mock
    async def test_transport_error_raises_with_status_zero(self, vcs) -> None:
        respx.get(f"{REPO}/pulls/7").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(GitHubApiError) as exc_info:
            await vcs.get_pull_request(7)

        assert exc_info.value.status_code == 0
