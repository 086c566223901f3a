"""Step outputs written to the runner's ``$GITHUB_OUTPUT`` file."""

import json
import uuid
from pathlib import Path

from diff_annotator.core.domain.review.raw_comment import dump_raw_comments
from diff_annotator.core.domain.review.run_summary import RunSummary


def summary_outputs(summary: RunSummary) -> dict[str, str]:
    return {
        "review": json.dumps(summary.review),
        "suggestions": json.dumps([comment.to_api() for comment in summary.suggestions]),
        "raw-comments": json.dumps(dump_raw_comments(summary.raw_comments)),
    }


def write_outputs(output_path: str | None, outputs: dict[str, str]) -> bool:
    """Append outputs using the multiline delimiter syntax. Returns False outside a runner."""
    if not output_path:
        return False
    with Path(output_path).open("a", encoding="utf-8") as handle:
        for name, value in outputs.items():
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    return True
