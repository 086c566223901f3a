from diff_annotator.infrastructure.configuration.action_settings import ActionSettings, load_settings
from diff_annotator.infrastructure.configuration.github_event_loader import (
    load_event,
    pull_request_number,
)

__all__ = ["ActionSettings", "load_event", "load_settings", "pull_request_number"]
