from diff_annotator.core.domain.diff.change_kind import ChangeKind
from diff_annotator.core.domain.diff.diff_change import NO_NEWLINE_MARKER, DiffChange
from diff_annotator.core.domain.diff.file_diff import FileDiff, Hunk

__all__ = ["NO_NEWLINE_MARKER", "ChangeKind", "DiffChange", "FileDiff", "Hunk"]
