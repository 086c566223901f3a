from dataclasses import dataclass, replace

from diff_annotator.core.domain.diff.change_kind import ChangeKind

NO_NEWLINE_MARKER = "No newline at end of file"


@dataclass(frozen=True, slots=True)
class DiffChange:
    """One line of a hunk.

    ``content`` keeps the leading diff marker (``+``, ``-`` or a space).
    ``line`` is the new-file line number for additions and context lines and
    the old-file line number for deletions.
    """

    kind: ChangeKind
    line: int
    content: str
    ordinal: int = 0
    position: int | None = None

    @property
    def is_bare_marker(self) -> bool:
        return self.content in ("+", "-")

    @property
    def is_no_newline_marker(self) -> bool:
        return NO_NEWLINE_MARKER in self.content

    def at_position(self, position: int) -> "DiffChange":
        return replace(self, position=position)
