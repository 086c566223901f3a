"""Unit tests for ActionSettings (environment only, no network)."""

import pytest

from diff_annotator.core.application.exceptions import ConfigurationError
from diff_annotator.infrastructure.configuration.action_settings import load_settings


class TestActionSettings:
    def test_reads_hyphenated_input_variables(self, action_env) -> None:
        settings = load_settings()

        assert settings.repo_token.get_secret_value() == "ghs_test"
        assert settings.ai_model_api_key.get_secret_value() == "sk-test"
        assert settings.repository_owner == "octo"
        assert settings.repository_name == "repo"
        assert settings.max_retries == 3

    def test_blank_model_resolves_platform_default(self, action_env) -> None:
        assert load_settings().model_name == "gpt-4o-2024-08-06"

    def test_explicit_model_wins(self, action_env, monkeypatch) -> None:
        monkeypatch.setenv("INPUT_AI-MODEL-NAME", "deepseek/deepseek-chat")
        monkeypatch.setenv("INPUT_PLATFORM", "OpenRouter")

        settings = load_settings()

        assert settings.platform == "openrouter"
        assert settings.model_name == "deepseek/deepseek-chat"

    @pytest.mark.parametrize(
        ("raw", "expected"), [("true", True), ("TRUE", True), ("false", False), ("yes", False), ("1", False)]
    )
    def test_delete_flag_is_true_only_for_literal_true(self, action_env, monkeypatch, raw, expected) -> None:
        monkeypatch.setenv("INPUT_DELETE-EXISTING-REVIEW-BY-BOT", raw)

        assert load_settings().delete_existing_review_by_bot is expected

    def test_blank_max_retries_uses_default(self, action_env, monkeypatch) -> None:
        monkeypatch.setenv("INPUT_MAX-RETRIES", "")

        assert load_settings().max_retries == 3

    def test_negative_max_retries_is_rejected(self, action_env, monkeypatch) -> None:
        monkeypatch.setenv("INPUT_MAX-RETRIES", "-1")

        with pytest.raises(ConfigurationError):
            load_settings()

    def test_missing_token_is_a_configuration_error(self, action_env, monkeypatch) -> None:
        monkeypatch.delenv("INPUT_REPO-TOKEN")

        with pytest.raises(ConfigurationError, match="INPUT_REPO-TOKEN"):
            load_settings()

    def test_malformed_repository_is_a_configuration_error(self, action_env, monkeypatch) -> None:
        monkeypatch.setenv("GITHUB_REPOSITORY", "no-slash")

        with pytest.raises(ConfigurationError):
            _ = load_settings().repository_owner
