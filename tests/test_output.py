"""Tests for the terminal and JSON reporters."""

import json

from rich.console import Console

from gitnav.git.models import BranchEntry, FileEntry, FileStatus
from gitnav.output import json_report
from gitnav.output.terminal import (
    StatusHeader,
    format_ahead_behind,
    print_error,
    print_usage_error,
    render_branches,
    render_diff,
    render_files,
    render_status,
)
from gitnav.snapshot.models import Snapshot


def _entries():
    return [
        FileEntry(1, FileStatus.UNMERGED, "conflict.txt", False),
        FileEntry(2, FileStatus.ADDED, "new.py", True),
        FileEntry(3, FileStatus.MODIFIED, "app.py", False),
        FileEntry(4, FileStatus.UNTRACKED, "notes.md", False),
    ]


class TestAheadBehind:
    def test_variants(self):
        assert format_ahead_behind((2, 3)) == " (+2/-3)"
        assert format_ahead_behind((2, 0)) == " (+2)"
        assert format_ahead_behind((0, 3)) == " (-3)"
        assert format_ahead_behind((0, 0)) == ""
        assert format_ahead_behind(None) == ""


class TestRenderFiles:
    def test_sections_and_lines(self):
        console = Console(record=True, width=120)
        render_files(_entries(), console)
        text = console.export_text()

        assert text.index("➤ Unmerged:") < text.index("➤ Staged:")
        assert text.index("➤ Staged:") < text.index("➤ Not staged:")
        assert text.index("➤ Not staged:") < text.index("➤ Untracked:")
        assert "   (both modified) [1] conflict.txt" in text
        assert "   (new) [2] new.py" in text
        assert "   (modified) [3] app.py" in text
        assert "   (untracked) [4] notes.md" in text

    def test_empty_sections_omitted(self):
        console = Console(record=True, width=120)
        render_files([FileEntry(1, FileStatus.MODIFIED, "a.py", False)], console)
        text = console.export_text()
        assert "Not staged" in text
        assert "Staged:" not in text.replace("Not staged:", "")

    def test_paths_are_not_markup(self):
        console = Console(record=True, width=120)
        render_files([FileEntry(1, FileStatus.UNTRACKED, "[bold]x.txt", False)], console)
        assert "[bold]x.txt" in console.export_text()


class TestRenderStatus:
    def test_clean_tree(self, capsys):
        render_status([])
        assert "Nothing to commit, working tree clean." in capsys.readouterr().out

    def test_header(self, capsys):
        header = StatusHeader(branch="main", ahead_behind=(1, 0), parent=("abc1234", "init"))
        render_status(_entries()[:1], header)
        out = capsys.readouterr().out
        assert "Branch: main (+1)" in out
        assert "Parent: abc1234 init" in out

    def test_header_without_commits(self, capsys):
        render_status([], StatusHeader(branch="-none-"))
        assert "no commits yet" in capsys.readouterr().out


class TestRenderBranches:
    def test_current_marked(self, capsys):
        render_branches(
            [BranchEntry(0, "main", True), BranchEntry(1, "dev")], ahead_behind=(0, 2)
        )
        out = capsys.readouterr().out
        assert "[*] main (-2)" in out
        assert "[1] dev" in out

    def test_no_branches(self, capsys):
        render_branches([])
        assert "No branches found" in capsys.readouterr().out


class TestRenderDiff:
    def test_untracked(self, capsys):
        render_diff(FileEntry(1, FileStatus.UNTRACKED, "n.txt", False), "", banner=False)
        assert "File is untracked: n.txt" in capsys.readouterr().out

    def test_empty_diff(self, capsys):
        render_diff(FileEntry(1, FileStatus.MODIFIED, "m.txt", False), "\n", banner=True)
        out = capsys.readouterr().out
        assert "m.txt" in out
        assert "No changes to show for m.txt" in out


class TestMessages:
    def test_error_on_stderr(self, capsys):
        print_error("Index 6 is out of range (1-5 available)")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "✕ Error: Index 6 is out of range (1-5 available)" in captured.err

    def test_usage_block(self, capsys):
        print_usage_error("No file indices provided", ["gitnav add <index>..."])
        err = capsys.readouterr().err
        assert "No file indices provided." in err
        assert "Usage:" in err
        assert "gitnav add <index>..." in err
        assert "--help" in err


class TestJsonReport:
    def test_status_shape(self):
        snap = Snapshot(kind="files", repo_path="/repo", entries=_entries()[1:2])
        data = json.loads(json_report.render(snap, branch="main", ahead_behind=(1, 2)))
        assert data["files"] == [
            {"index": 2, "status": "Added", "path": "new.py", "staged": True}
        ]
        assert data["branch"] == "main"
        assert data["ahead"] == 1
        assert data["behind"] == 2

    def test_optional_fields_absent(self):
        snap = Snapshot(kind="branches", repo_path="/repo", entries=[BranchEntry(0, "main", True)])
        data = json.loads(json_report.render(snap))
        assert "branch" not in data
        assert "ahead" not in data
        assert data["branches"][0]["is_current"] is True
