import pytest

from diff_annotator.core.domain.review.raw_comment import (
    ChangePayload,
    RawComment,
    SuggestedComment,
    SuggestionsPayload,
)

# One file, one hunk: context, a one-line replacement on line 5, then a plain addition.
REPLACEMENT_DIFF = """\
diff --git a/a.js b/a.js
index 1111111..2222222 100644
--- a/a.js
+++ b/a.js
@@ -4,2 +4,3 @@
 const x = 1;
-foo();
+bar();
+baz();
"""


@pytest.fixture
def replacement_diff() -> str:
    return REPLACEMENT_DIFF


def _make_raw_comment(path: str = "a.js", line: int = 5, position: int = 3, previously: str | None = None) -> RawComment:
    return RawComment(
        path=path,
        position=position,
        line=line,
        change=ChangePayload(type="add", add=True, line=line, content="+bar();", relative_position=position),
        previously=previously,
    )


def _make_payload(*entries: tuple[RawComment, str | None]) -> SuggestionsPayload:
    return SuggestionsPayload(
        comments_to_add=[
            SuggestedComment(**raw.model_dump(), suggestions=text) for raw, text in entries
        ]
    )


@pytest.fixture
def make_raw_comment():
    return _make_raw_comment


@pytest.fixture
def make_payload():
    return _make_payload


@pytest.fixture
def action_env(monkeypatch, tmp_path):
    """Minimal runner environment for a pull_request event."""
    event = tmp_path / "event.json"
    event.write_text('{"pull_request": {"number": 7, "body": "Adds bar"}}', encoding="utf-8")
    output = tmp_path / "output.txt"
    output.write_text("", encoding="utf-8")
    env = {
        "INPUT_REPO-TOKEN": "ghs_test",
        "INPUT_AI-MODEL-API-KEY": "sk-test",
        "INPUT_PLATFORM": "openai",
        "INPUT_AI-MODEL-NAME": "",
        "INPUT_RULES": "",
        "INPUT_FILESTOIGNORE": "",
        "INPUT_DELETE-EXISTING-REVIEW-BY-BOT": "false",
        "INPUT_MAX-RETRIES": "3",
        "GITHUB_REPOSITORY": "octo/repo",
        "GITHUB_EVENT_PATH": str(event),
        "GITHUB_API_URL": "https://api.github.com",
        "GITHUB_OUTPUT": str(output),
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
