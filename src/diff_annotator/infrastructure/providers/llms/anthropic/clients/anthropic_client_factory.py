from __future__ import annotations

from dataclasses import dataclass

from anthropic import AsyncAnthropic

from diff_annotator.infrastructure.providers.llms.anthropic.clients.anthropic_config import (
    AnthropicConfig,
)


@dataclass(frozen=True, slots=True)
class AnthropicClientFactory:
    config: AnthropicConfig

    def create(self) -> AsyncAnthropic:
        return AsyncAnthropic(
            api_key=self.config.api_key,
            timeout=self.config.timeout_s,
            max_retries=self.config.max_retries,
        )
