from abc import ABC, abstractmethod

from diff_annotator.core.domain.diff.file_diff import FileDiff


class DiffParserPort(ABC):
    @abstractmethod
    def parse(self, diff_text: str) -> list[FileDiff]:
        """Parses unified diff text. Raises DiffParseError on malformed input."""
