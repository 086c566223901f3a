"""GitHub Action inputs and runner context.

The runner exports every ``with:`` input as ``INPUT_<NAME>`` with the name
upper-cased and hyphens kept, so aliases carry the exact variable names.
"""

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from diff_annotator.core.application.exceptions import ConfigurationError
from diff_annotator.core.domain.shared.llm_platform import LlmPlatform


class ActionSettings(BaseSettings):
    repo_token: SecretStr = Field(alias="INPUT_REPO-TOKEN")
    ai_model_api_key: SecretStr = Field(alias="INPUT_AI-MODEL-API-KEY")
    platform: str = Field(default=LlmPlatform.OPENAI.value, alias="INPUT_PLATFORM")
    ai_model_name: str = Field(default="", alias="INPUT_AI-MODEL-NAME")
    rules: str = Field(default="", alias="INPUT_RULES")
    files_to_ignore: str = Field(default="", alias="INPUT_FILESTOIGNORE")
    delete_existing_review_by_bot: bool = Field(
        default=False, alias="INPUT_DELETE-EXISTING-REVIEW-BY-BOT"
    )
    max_retries: int = Field(default=3, ge=0, alias="INPUT_MAX-RETRIES")

    github_repository: str = Field(default="", alias="GITHUB_REPOSITORY")
    github_event_path: str | None = Field(default=None, alias="GITHUB_EVENT_PATH")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    github_output: str | None = Field(default=None, alias="GITHUB_OUTPUT")
    http_timeout_s: float = Field(default=30.0, alias="DIFF_ANNOTATOR_HTTP_TIMEOUT")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True, env_ignore_empty=True)

    @field_validator("delete_existing_review_by_bot", mode="before")
    @classmethod
    def _only_literal_true(cls, value: object) -> bool:
        if isinstance(value, bool):
            return value
        return str(value or "").strip().lower() == "true"

    @field_validator("platform", mode="before")
    @classmethod
    def _normalize_platform(cls, value: object) -> str:
        return str(value or "").strip().lower()

    @property
    def repository_owner(self) -> str:
        return self._repository_parts()[0]

    @property
    def repository_name(self) -> str:
        return self._repository_parts()[1]

    @property
    def model_name(self) -> str:
        """Configured model, or the platform default when the input is blank."""
        try:
            return LlmPlatform(self.platform).resolve_model(self.ai_model_name)
        except ValueError:
            return self.ai_model_name

    def _repository_parts(self) -> tuple[str, str]:
        owner, sep, name = self.github_repository.partition("/")
        if not sep or not owner or not name:
            raise ConfigurationError(
                "GITHUB_REPOSITORY must look like 'owner/repo'",
                context={"github_repository": self.github_repository},
            )
        return owner, name


def load_settings() -> ActionSettings:
    try:
        return ActionSettings()
    except ValidationError as exc:
        missing = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        raise ConfigurationError(f"Invalid action inputs: {', '.join(missing)}") from exc
