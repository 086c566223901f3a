"""Deterministic pull request review pipeline."""

from dataclasses import dataclass

import structlog
from structlog.contextvars import bind_contextvars

from diff_annotator.core.application.exceptions import (
    WorkflowExecutionError,
    WorkflowHaltedException,
)
from diff_annotator.core.application.ports.vcs_port import VcsPort
from diff_annotator.core.application.skills.review.build_diff_payload_skill import (
    BuildDiffPayloadInput,
    BuildDiffPayloadSkill,
)
from diff_annotator.core.application.skills.review.cleanup_bot_reviews_skill import (
    CleanupBotReviewsInput,
    CleanupBotReviewsSkill,
)
from diff_annotator.core.application.skills.review.publish_review_skill import (
    PublishReviewInput,
    PublishReviewSkill,
)
from diff_annotator.core.application.skills.review.request_suggestions_skill import (
    RequestSuggestionsInput,
    RequestSuggestionsSkill,
)
from diff_annotator.core.domain.review.raw_comment import RawComment
from diff_annotator.core.domain.review.run_summary import RunSummary
from diff_annotator.core.domain.review.suggestion_reconciler import reconcile

logger = structlog.get_logger()


@dataclass(frozen=True)
class ReviewOptions:
    model_name: str
    rules: str = ""
    files_to_ignore: str = ""
    delete_existing_review_by_bot: bool = False


class DiffReviewWorkflow:
    """Review pipeline: Fetch -> Cleanup -> Normalize -> Suggest -> Reconcile -> Publish."""

    def __init__(
        self,
        vcs: VcsPort,
        build_payload: BuildDiffPayloadSkill,
        request_suggestions: RequestSuggestionsSkill,
        publish: PublishReviewSkill,
        cleanup: CleanupBotReviewsSkill,
        options: ReviewOptions,
    ) -> None:
        self._vcs = vcs
        self._build_payload = build_payload
        self._request_suggestions = request_suggestions
        self._publish = publish
        self._cleanup = cleanup
        self._options = options

    async def execute(self, pull_number: int | None) -> RunSummary:
        """Run the review for one pull request. ``None`` means the event was not a PR."""
        try:
            return await self._run_review_pipeline(pull_number)
        except WorkflowHaltedException as halt:
            logger.warning(str(halt), **halt.context)
            return RunSummary()
        except WorkflowExecutionError:
            raise
        except Exception as exc:
            raise WorkflowExecutionError(str(exc), context={"pull_number": pull_number}) from exc

    async def _run_review_pipeline(self, pull_number: int | None) -> RunSummary:
        pull_number = self._step_1_require_pull_request(pull_number)
        diff_text, description = await self._step_2_fetch_pull_request(pull_number)
        await self._step_3_cleanup_bot_reviews(pull_number)
        raw_comments = await self._step_4_build_payload(diff_text)
        if not raw_comments:
            logger.info("No reviewable changes after filtering. Code review complete.")
            return RunSummary()

        payload = await self._step_5_request_suggestions(raw_comments, description)
        comments = reconcile(payload, raw_comments)
        if not comments:
            logger.info("No suggestions found. Code review complete. All good!")
            return RunSummary(raw_comments=raw_comments)

        review = await self._step_6_publish(pull_number, comments)
        logger.info("Code review complete!", comments=len(comments))
        return RunSummary(review=review, suggestions=comments, raw_comments=raw_comments)

    # ── Step Methods ─────────────────────────────────────────────────

    def _step_1_require_pull_request(self, pull_number: int | None) -> int:
        if pull_number is None:
            raise WorkflowHaltedException("Not a pull request, skipping...")
        bind_contextvars(pull_number=pull_number)
        return pull_number

    async def _step_2_fetch_pull_request(self, pull_number: int) -> tuple[str, str | None]:
        logger.info("Fetching pull request details...")
        diff_text = await self._vcs.get_pull_request_diff(pull_number)
        pull_request = await self._vcs.get_pull_request(pull_number)
        return diff_text, pull_request.get("body")

    async def _step_3_cleanup_bot_reviews(self, pull_number: int) -> None:
        if not self._options.delete_existing_review_by_bot:
            logger.info("Skipping deleting existing comments for all reviews by bot...")
            return
        logger.info("Preparing to delete existing comments...")
        await self._cleanup.execute(CleanupBotReviewsInput(pull_number=pull_number))

    async def _step_4_build_payload(self, diff_text: str) -> list[RawComment]:
        logger.info("Reviewing pull request diff...")
        return await self._build_payload.execute(
            BuildDiffPayloadInput(diff_text=diff_text, files_to_ignore=self._options.files_to_ignore)
        )

    async def _step_5_request_suggestions(self, raw_comments: list[RawComment], description: str | None):
        try:
            return await self._request_suggestions.execute(
                RequestSuggestionsInput(
                    raw_comments=raw_comments, rules=self._options.rules, description=description
                )
            )
        except Exception as exc:
            raise WorkflowExecutionError(
                f"Could not generate suggestions: {exc}",
                context={"model": self._options.model_name},
            ) from exc

    async def _step_6_publish(self, pull_number: int, comments) -> dict:
        logger.info("Adding review comments...")
        return await self._publish.execute(
            PublishReviewInput(
                pull_number=pull_number, model_name=self._options.model_name, comments=comments
            )
        )
