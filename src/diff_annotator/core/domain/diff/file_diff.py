from dataclasses import dataclass, field

from diff_annotator.core.domain.diff.diff_change import DiffChange

Hunk = tuple[DiffChange, ...]


@dataclass(frozen=True, slots=True)
class FileDiff:
    source_path: str
    target_path: str
    is_removed: bool = False
    hunks: tuple[Hunk, ...] = field(default_factory=tuple)

    @property
    def path(self) -> str:
        """Deleted files are addressed by their old path, everything else by the new one."""
        return self.source_path if self.is_removed else self.target_path
