"""Renders structlog events as GitHub Actions log lines.

Warnings and errors become workflow commands (``::warning::`` /
``::error::``) so the runner surfaces them as annotations; everything else is
a plain ``[timestamp]: message`` line.
"""

from typing import Any

_COMMANDS: dict[str, str] = {
    "debug": "::debug::",
    "warning": "::warning::",
    "error": "::error::",
    "critical": "::error::",
    "exception": "::error::",
}


def render_workflow_command(_: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    level = str(event_dict.pop("level", method_name)).lower()
    timestamp = event_dict.pop("timestamp", None)
    event = str(event_dict.pop("event", ""))
    exception = event_dict.pop("exception", None)

    text = f"[{timestamp}]: {event}" if timestamp else event
    if event_dict:
        text += " " + " ".join(f"{key}={value!r}" for key, value in event_dict.items())
    if exception:
        text += f"\n{exception}"

    command = _COMMANDS.get(level)
    if command is None:
        return text
    return command + escape_command_data(text)


def escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
