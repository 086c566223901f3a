"""Action entry point: wires settings, backends and the review workflow."""

import asyncio
import logging
import sys

import structlog

from diff_annotator.core.application.exceptions import ApplicationError, ProviderError
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.application.ports.vcs_port import VcsPort
from diff_annotator.core.application.skills.review.build_diff_payload_skill import BuildDiffPayloadSkill
from diff_annotator.core.application.skills.review.cleanup_bot_reviews_skill import (
    CleanupBotReviewsSkill,
)
from diff_annotator.core.application.skills.review.publish_review_skill import PublishReviewSkill
from diff_annotator.core.application.skills.review.request_suggestions_skill import (
    RequestSuggestionsSkill,
)
from diff_annotator.core.application.workflows.review.diff_review_workflow import (
    DiffReviewWorkflow,
    ReviewOptions,
)
from diff_annotator.infrastructure.common.retry.retry_policy import RetryPolicy
from diff_annotator.infrastructure.configuration.action_settings import ActionSettings, load_settings
from diff_annotator.infrastructure.configuration.github_event_loader import (
    load_event,
    pull_request_number,
)
from diff_annotator.infrastructure.observability.logger_factory_service import configure_logging
from diff_annotator.infrastructure.providers.llms.facade.llm_provider_factory import LlmProviderFactory
from diff_annotator.infrastructure.tools.actions.action_outputs import summary_outputs, write_outputs
from diff_annotator.infrastructure.tools.diff.unidiff_parser import UnidiffParser
from diff_annotator.infrastructure.tools.vcs.github.github_http_client import (
    GitHubApiError,
    GitHubHttpClient,
)
from diff_annotator.infrastructure.tools.vcs.github.github_vcs_provider import GitHubVcsProvider

logger = structlog.get_logger()


def build_workflow(
    settings: ActionSettings, vcs: VcsPort, provider: SuggestionProviderPort
) -> DiffReviewWorkflow:
    return DiffReviewWorkflow(
        vcs=vcs,
        build_payload=BuildDiffPayloadSkill(parser=UnidiffParser()),
        request_suggestions=RequestSuggestionsSkill(
            provider=provider,
            model=settings.model_name,
            retry=RetryPolicy(retries=settings.max_retries),
            log=logging.getLogger("diff_annotator.suggestions"),
        ),
        publish=PublishReviewSkill(vcs=vcs),
        cleanup=CleanupBotReviewsSkill(vcs=vcs),
        options=ReviewOptions(
            model_name=settings.model_name,
            rules=settings.rules,
            files_to_ignore=settings.files_to_ignore,
            delete_existing_review_by_bot=settings.delete_existing_review_by_bot,
        ),
    )


async def run() -> int:
    """Runs one review and returns the process exit code."""
    configure_logging()
    try:
        logger.info("Retrieving tokens and inputs...")
        settings = load_settings()
        provider = LlmProviderFactory.create(
            settings.platform, settings.ai_model_api_key.get_secret_value(), settings.model_name
        )
        pull_number = pull_request_number(load_event(settings.github_event_path))

        async with GitHubHttpClient(
            settings.repo_token.get_secret_value(),
            base_url=settings.github_api_url,
            timeout=settings.http_timeout_s,
        ) as client:
            vcs = GitHubVcsProvider(client, settings.repository_owner, settings.repository_name)
            summary = await build_workflow(settings, vcs, provider).execute(pull_number)
        write_outputs(settings.github_output, summary_outputs(summary))
        return 0
    except (ApplicationError, ProviderError, GitHubApiError) as exc:
        logger.error(str(exc), **getattr(exc, "context", {}))
        return 1
    except Exception:
        logger.exception("Unexpected failure while reviewing the pull request")
        return 1


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
