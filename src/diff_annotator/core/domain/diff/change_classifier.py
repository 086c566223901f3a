from collections.abc import Sequence

from diff_annotator.core.domain.diff.change_kind import ChangeKind
from diff_annotator.core.domain.diff.diff_change import DiffChange
from diff_annotator.core.domain.review.raw_comment import ChangePayload, RawComment


def classify_hunk(path: str, changes: Sequence[DiffChange]) -> list[RawComment]:
    """Emit records for the filtered changes of one hunk.

    A deletion immediately followed by an addition on the same line number is
    folded into that addition, which carries the deleted text as ``previously``.
    Bare ``+``/``-`` lines emit nothing but still count as neighbours.
    """
    records: list[RawComment] = []
    for index, change in enumerate(changes):
        if change.is_bare_marker:
            continue
        if change.kind is ChangeKind.ADD:
            previous = changes[index - 1] if index > 0 else None
            if _replaces(previous, change):
                records.append(_record(path, change, previously=previous.content))
            else:
                records.append(_record(path, change))
            continue
        following = changes[index + 1] if index < len(changes) - 1 else None
        if change.kind is ChangeKind.DEL and _replaced_by(change, following):
            continue
        records.append(_record(path, change))
    return records


def _replaces(previous: DiffChange | None, change: DiffChange) -> bool:
    return previous is not None and previous.kind is ChangeKind.DEL and previous.line == change.line


def _replaced_by(change: DiffChange, following: DiffChange | None) -> bool:
    return following is not None and following.kind is ChangeKind.ADD and following.line == change.line


def _record(path: str, change: DiffChange, previously: str | None = None) -> RawComment:
    if change.position is None:
        raise ValueError(f"Change without position in {path} at line {change.line}")
    return RawComment(
        path=path,
        position=change.position,
        line=change.line,
        change=ChangePayload(
            type=change.kind.value,
            add=change.kind is ChangeKind.ADD,
            line=change.line,
            content=change.content,
            relative_position=change.position,
        ),
        previously=previously,
    )
