import logging
from dataclasses import dataclass

from diff_annotator.core.application.ports.diff_parser_port import DiffParserPort
from diff_annotator.core.application.skills.skill import BaseSkill
from diff_annotator.core.domain.diff.diff_normalizer import normalize
from diff_annotator.core.domain.diff.path_filter import build_ignore_list, filter_comments
from diff_annotator.core.domain.review.raw_comment import RawComment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildDiffPayloadInput:
    """Input contract for turning diff text into reviewable records."""

    diff_text: str
    files_to_ignore: str = ""


class BuildDiffPayloadSkill(BaseSkill[BuildDiffPayloadInput, list[RawComment]]):
    """Parses the diff, assigns positions, classifies changes and drops ignored paths."""

    def __init__(self, parser: DiffParserPort) -> None:
        self._parser = parser

    async def execute(self, input_data: BuildDiffPayloadInput) -> list[RawComment]:
        files = self._parser.parse(input_data.diff_text)
        raw_comments = normalize(files)
        patterns = build_ignore_list(input_data.files_to_ignore)
        filtered = filter_comments(raw_comments, patterns)
        logger.info(
            "[BuildDiffPayload] %d files, %d records, %d after ignore patterns",
            len(files),
            len(raw_comments),
            len(filtered),
        )
        return filtered
