"""Unit tests for the change classifier (pure, zero I/O)."""

from diff_annotator.core.domain.diff import ChangeKind, DiffChange
from diff_annotator.core.domain.diff.change_classifier import classify_hunk


def _change(kind: ChangeKind, line: int, content: str, position: int) -> DiffChange:
    return DiffChange(kind=kind, line=line, content=content, position=position)


class TestClassifyHunk:
    def test_delete_then_add_on_same_line_is_one_record(self) -> None:
        changes = [
            _change(ChangeKind.DEL, 5, "-foo();", 2),
            _change(ChangeKind.ADD, 5, "+bar();", 3),
        ]

        records = classify_hunk("a.js", changes)

        assert len(records) == 1
        assert records[0].position == 3
        assert records[0].previously == "-foo();"

    def test_delete_then_add_on_different_lines_are_two_records(self) -> None:
        changes = [
            _change(ChangeKind.DEL, 5, "-foo();", 2),
            _change(ChangeKind.ADD, 6, "+bar();", 3),
        ]

        records = classify_hunk("a.js", changes)

        assert [(r.change.type, r.previously) for r in records] == [("del", None), ("add", None)]

    def test_trailing_deletion_has_no_next_element(self) -> None:
        records = classify_hunk("a.js", [_change(ChangeKind.DEL, 9, "-gone", 4)])

        assert [(r.line, r.change.type) for r in records] == [(9, "del")]

    def test_leading_addition_has_no_previous_element(self) -> None:
        records = classify_hunk("a.js", [_change(ChangeKind.ADD, 1, "+first", 1)])

        assert records[0].previously is None

    def test_bare_deletion_still_counts_as_previous_line(self) -> None:
        # a bare "-" emits nothing, yet the addition still sees it as its neighbour
        changes = [
            _change(ChangeKind.DEL, 3, "-", 1),
            _change(ChangeKind.ADD, 3, "+text", 2),
        ]

        records = classify_hunk("a.js", changes)

        assert len(records) == 1
        assert records[0].previously == "-"

    def test_record_mirrors_change_payload(self) -> None:
        record = classify_hunk("src/x.py", [_change(ChangeKind.ADD, 7, "+y = 1", 12)])[0]

        dumped = record.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {
            "path": "src/x.py",
            "position": 12,
            "line": 7,
            "change": {"type": "add", "add": True, "ln": 7, "content": "+y = 1", "relativePosition": 12},
        }
