from diff_annotator.infrastructure.tools.vcs.github.github_http_client import (
    GitHubApiError,
    GitHubHttpClient,
)
from diff_annotator.infrastructure.tools.vcs.github.github_vcs_provider import GitHubVcsProvider

__all__ = ["GitHubApiError", "GitHubHttpClient", "GitHubVcsProvider"]
