import json
from pathlib import Path
from typing import Any

import structlog

from diff_annotator.core.application.exceptions import ConfigurationError

logger = structlog.get_logger()


def load_event(event_path: str | None) -> dict[str, Any]:
    if not event_path:
        logger.debug("No GITHUB_EVENT_PATH set, assuming an empty event")
        return {}
    try:
        return json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Could not read the workflow event payload: {exc}", context={"event_path": event_path}
        ) from exc


def pull_request_number(event: dict[str, Any]) -> int | None:
    """Number of the triggering pull request, or None for non-PR events."""
    pull_request = event.get("pull_request")
    if not pull_request:
        return None
    return int(pull_request["number"])
