from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ReviewComment:
    """Inline comment as the hosting API expects it."""

    path: str
    line: int
    body: str

    def to_api(self) -> dict[str, Any]:
        return asdict(self)
