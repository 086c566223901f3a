"""Unified diff parsing on top of ``unidiff``.

Pure translation from ``unidiff`` objects into the domain's FileDiff and
DiffChange; no filtering or positioning happens here.
"""

import structlog
from unidiff import PatchSet, UnidiffParseError
from unidiff.constants import LINE_TYPE_ADDED, LINE_TYPE_NO_NEWLINE, LINE_TYPE_REMOVED
from unidiff.patch import Hunk as UnidiffHunk
from unidiff.patch import Line, PatchedFile

from diff_annotator.core.application.exceptions import DiffParseError
from diff_annotator.core.application.ports.diff_parser_port import DiffParserPort
from diff_annotator.core.domain.diff import ChangeKind, DiffChange, FileDiff, Hunk

logger = structlog.get_logger()

_PREFIXES = ("a/", "b/")


class UnidiffParser(DiffParserPort):
    def parse(self, diff_text: str) -> list[FileDiff]:
        if not diff_text.strip():
            return []
        try:
            patch = PatchSet.from_string(diff_text)
        except UnidiffParseError as exc:
            raise DiffParseError(f"Could not parse pull request diff: {exc}") from exc
        files = [_to_file_diff(patched_file) for patched_file in patch]
        logger.debug("Parsed diff", files=len(files))
        return files


def _to_file_diff(patched_file: PatchedFile) -> FileDiff:
    if patched_file.is_binary_file:
        logger.debug("Skipping binary file", path=patched_file.path)
    return FileDiff(
        source_path=_strip_prefix(patched_file.source_file),
        target_path=_strip_prefix(patched_file.target_file),
        is_removed=patched_file.is_removed_file,
        hunks=tuple(_to_hunk(hunk) for hunk in patched_file),
    )


def _to_hunk(hunk: UnidiffHunk) -> Hunk:
    changes: list[DiffChange] = []
    for ordinal, line in enumerate(hunk):
        previous = changes[-1] if changes else None
        changes.append(_to_change(line, ordinal, previous))
    return tuple(changes)


def _to_change(line: Line, ordinal: int, previous: DiffChange | None) -> DiffChange:
    value = line.value.rstrip("\n")
    if line.line_type == LINE_TYPE_NO_NEWLINE:
        # Occupies a position; inherits kind and line number of the line it annotates
        kind = previous.kind if previous else ChangeKind.NORMAL
        number = previous.line if previous else 0
        content = value if value.startswith("\\") else f"\\{value}"
        return DiffChange(kind=kind, line=number, content=content, ordinal=ordinal)
    if line.line_type == LINE_TYPE_ADDED:
        return DiffChange(ChangeKind.ADD, line.target_line_no, f"+{value}", ordinal)
    if line.line_type == LINE_TYPE_REMOVED:
        return DiffChange(ChangeKind.DEL, line.source_line_no, f"-{value}", ordinal)
    return DiffChange(ChangeKind.NORMAL, line.target_line_no, f" {value}", ordinal)


def _strip_prefix(path: str) -> str:
    if path.startswith(_PREFIXES):
        return path[2:]
    return path
