from __future__ import annotations

from dataclasses import dataclass

from google import genai
from google.genai import types

from diff_annotator.infrastructure.providers.llms.gemini.clients.gemini_config import GeminiConfig


@dataclass(frozen=True, slots=True)
class GeminiClientFactory:
    config: GeminiConfig

    def create(self) -> genai.Client:
        return genai.Client(
            api_key=self.config.api_key,
            http_options=types.HttpOptions(timeout=int(self.config.timeout_s * 1000)),
        )
