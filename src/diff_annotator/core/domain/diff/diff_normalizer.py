"""Turns parsed file diffs into addressable change records.

Positions are assigned in a separate pass over the untouched hunks, so every
context line, artifact line and hunk boundary is counted before anything is
filtered out.
"""

from collections.abc import Iterable

from diff_annotator.core.domain.diff.change_classifier import classify_hunk
from diff_annotator.core.domain.diff.change_kind import ChangeKind
from diff_annotator.core.domain.diff.diff_change import DiffChange
from diff_annotator.core.domain.diff.file_diff import FileDiff, Hunk
from diff_annotator.core.domain.review.raw_comment import RawComment


def assign_positions(file_diff: FileDiff) -> FileDiff:
    """Number every line of every hunk; each hunk after the first skips one slot."""
    counter = 0
    hunks: list[Hunk] = []
    for index, hunk in enumerate(file_diff.hunks):
        if index > 0:
            counter += 1
        positioned: list[DiffChange] = []
        for change in hunk:
            counter += 1
            positioned.append(change.at_position(counter))
        hunks.append(tuple(positioned))
    return FileDiff(
        source_path=file_diff.source_path,
        target_path=file_diff.target_path,
        is_removed=file_diff.is_removed,
        hunks=tuple(hunks),
    )


def reviewable_changes(hunk: Hunk) -> list[DiffChange]:
    return [
        change
        for change in hunk
        if change.kind is not ChangeKind.NORMAL and not change.is_no_newline_marker
    ]


def normalize(files: Iterable[FileDiff]) -> list[RawComment]:
    records: list[RawComment] = []
    for file_diff in files:
        positioned = assign_positions(file_diff)
        for hunk in positioned.hunks:
            records.extend(classify_hunk(positioned.path, reviewable_changes(hunk)))
    return records
