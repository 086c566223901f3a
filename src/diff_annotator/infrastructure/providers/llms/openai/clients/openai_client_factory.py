from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI

from diff_annotator.infrastructure.providers.llms.openai.clients.openai_config import OpenAiConfig


@dataclass(frozen=True, slots=True)
class OpenAiClientFactory:
    config: OpenAiConfig

    def create(self) -> AsyncOpenAI:
        # SDK retries stay off; RetryPolicy owns backoff
        return AsyncOpenAI(
            api_key=self.config.api_key,
            base_url=self.config.base_url,
            timeout=self.config.timeout_s,
            max_retries=self.config.max_retries,
        )
