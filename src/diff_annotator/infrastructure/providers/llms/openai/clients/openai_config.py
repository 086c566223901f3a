from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OpenAiConfig:
    """Connection settings for OpenAI and OpenAI-compatible endpoints."""

    api_key: str
    base_url: str | None = None
    timeout_s: float = 120.0
    max_retries: int = 0
