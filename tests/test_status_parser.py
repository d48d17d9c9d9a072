"""Tests for porcelain v1 -z status parsing."""

from gitnav.git.models import FileStatus, StatusRecord
from gitnav.git.status_parser import StatusParser, parse_status


def _raw(*fields: str) -> str:
    return "".join(f + "\0" for f in fields)


class TestStatusParser:
    def test_empty_output(self):
        assert parse_status("") == []

    def test_untracked(self):
        records = parse_status(_raw("?? notes.txt"))
        assert records == [StatusRecord("notes.txt", FileStatus.UNTRACKED, False)]

    def test_ignored_skipped(self):
        assert parse_status(_raw("!! build/")) == []

    def test_staged_only(self):
        records = parse_status(_raw("A  new.py"))
        assert records == [StatusRecord("new.py", FileStatus.ADDED, True)]

    def test_unstaged_only(self):
        records = parse_status(_raw(" M app.py"))
        assert records == [StatusRecord("app.py", FileStatus.MODIFIED, False)]

    def test_both_sides_produce_two_records(self):
        records = parse_status(_raw("MM app.py"))
        assert StatusRecord("app.py", FileStatus.MODIFIED, True) in records
        assert StatusRecord("app.py", FileStatus.MODIFIED, False) in records
        assert len(records) == 2

    def test_added_then_deleted_in_work_tree(self):
        records = parse_status(_raw("AD gone.txt"))
        assert records == [
            StatusRecord("gone.txt", FileStatus.ADDED, True),
            StatusRecord("gone.txt", FileStatus.DELETED, False),
        ]

    def test_rename_consumes_original_path(self):
        records = parse_status(_raw("R  new_name.py", "old_name.py", " M other.py"))
        assert records == [
            StatusRecord("new_name.py", FileStatus.RENAMED, True),
            StatusRecord("other.py", FileStatus.MODIFIED, False),
        ]

    def test_unmerged_pairs(self):
        for code in ("UU", "AA", "DD", "AU", "UA", "DU", "UD"):
            records = parse_status(_raw(f"{code} conflict.txt"))
            assert records == [StatusRecord("conflict.txt", FileStatus.UNMERGED, False)]

    def test_type_change(self):
        records = parse_status(_raw(" T link"))
        assert records[0].status is FileStatus.TYPE_CHANGED

    def test_path_with_spaces(self):
        records = parse_status(_raw("?? my file.txt"))
        assert records[0].path == "my file.txt"

    def test_parser_is_lazy(self):
        gen = StatusParser(_raw("?? a", "?? b")).parse()
        assert next(gen).path == "a"


class TestSortPriority:
    def test_unmerged_first_untracked_last(self):
        priorities = [
            FileStatus.UNMERGED.sort_priority(False),
            FileStatus.ADDED.sort_priority(True),
            FileStatus.MODIFIED.sort_priority(False),
            FileStatus.UNTRACKED.sort_priority(False),
        ]
        assert priorities == sorted(priorities)
        assert priorities[0] == 0

    def test_staged_before_unstaged(self):
        worst_staged = max(
            s.sort_priority(True)
            for s in FileStatus
            if s not in (FileStatus.UNMERGED, FileStatus.UNTRACKED)
        )
        best_unstaged = min(
            s.sort_priority(False)
            for s in FileStatus
            if s not in (FileStatus.UNMERGED, FileStatus.UNTRACKED)
        )
        assert worst_staged < best_unstaged
