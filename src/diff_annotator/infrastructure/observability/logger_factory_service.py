"""Structlog configuration with a GitHub Actions renderer and stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from diff_annotator.infrastructure.observability.logging.workflow_command_renderer import (
    render_workflow_command,
)

_CONFIGURED = False
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "google_genai")


def configure_logging() -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by LOG_FORMAT (actions|json|console), level by
    RUNNER_DEBUG.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO
    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output through the structlog pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "actions").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return render_workflow_command
