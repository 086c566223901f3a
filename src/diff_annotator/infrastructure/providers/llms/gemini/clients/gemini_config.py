from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeminiConfig:
    api_key: str
    timeout_s: float = 300.0
