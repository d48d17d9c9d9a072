"""Rich terminal reporter: numbered status sections, branch list and messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from gitnav.git.models import BranchEntry, FileEntry, FileStatus

_SECTIONS: Tuple[Tuple[str, str], ...] = (
    ("unmerged", "➤ Unmerged:"),
    ("staged", "➤ Staged:"),
    ("unstaged", "➤ Not staged:"),
    ("untracked", "➤ Untracked:"),
)

_SECTION_STYLE = {
    "unmerged": "bold red",
    "staged": "bold green",
    "unstaged": "bold yellow",
    "untracked": "bold cyan",
}


@dataclass
class StatusHeader:
    branch: str
    ahead_behind: Optional[Tuple[int, int]] = None
    parent: Optional[Tuple[str, str]] = None  # (short hash, subject)


def _stdout() -> Console:
    return Console(highlight=False)


def _stderr() -> Console:
    return Console(stderr=True, highlight=False)


def _section_of(entry: FileEntry) -> str:
    if entry.status is FileStatus.UNMERGED:
        return "unmerged"
    if entry.status is FileStatus.UNTRACKED:
        return "untracked"
    return "staged" if entry.staged else "unstaged"


def format_ahead_behind(ahead_behind: Optional[Tuple[int, int]]) -> str:
    if not ahead_behind:
        return ""
    ahead, behind = ahead_behind
    if ahead and behind:
        return f" (+{ahead}/-{behind})"
    if ahead:
        return f" (+{ahead})"
    if behind:
        return f" (-{behind})"
    return ""


def _header_lines(header: StatusHeader) -> List[Text]:
    branch = Text("Branch: ", style="dim")
    branch.append(header.branch, style="bold blue")
    branch.append(format_ahead_behind(header.ahead_behind), style="white")

    parent = Text("Parent: ", style="dim")
    if header.parent is None:
        parent.append("- no commits yet -", style="italic")
    else:
        short_hash, subject = header.parent
        parent.append(short_hash, style="yellow")
        parent.append(f" {subject}")
    return [branch, parent]


def _file_line(entry: FileEntry) -> Text:
    line = Text("   ")
    line.append(f"({entry.status.description})", style="dim")
    line.append(" [")
    line.append(str(entry.index), style="bold")
    line.append("] ")
    line.append(entry.path)
    return line


def render_files(entries: Sequence[FileEntry], console: Optional[Console] = None) -> None:
    """Print entries grouped into unmerged / staged / unstaged / untracked."""
    console = console or _stdout()
    grouped: Dict[str, List[FileEntry]] = {key: [] for key, _ in _SECTIONS}
    for entry in entries:
        grouped[_section_of(entry)].append(entry)

    for key, title in _SECTIONS:
        if not grouped[key]:
            continue
        console.print(Text(title, style=_SECTION_STYLE[key]))
        for entry in grouped[key]:
            console.print(_file_line(entry), soft_wrap=True)
        console.print()


def render_status(
    entries: Sequence[FileEntry],
    header: Optional[StatusHeader] = None,
) -> None:
    """Print the full ``gitnav status`` screen."""
    console = _stdout()
    if header is not None:
        console.print()
        for line in _header_lines(header):
            console.print(line, soft_wrap=True)
        console.print()

    if not entries:
        console.print(Text("Nothing to commit, working tree clean.", style="dim"))
        return
    render_files(entries, console)


def render_branches(
    branches: Iterable[BranchEntry],
    ahead_behind: Optional[Tuple[int, int]] = None,
) -> None:
    console = _stdout()
    branches = list(branches)
    if not branches:
        console.print(Text("No branches found. Make your first commit to create one.", style="dim"))
        return

    console.print(Text("Local Branches", style="bold"))
    for branch in branches:
        line = Text("[", style="dim")
        if branch.is_current:
            line.append("*", style="bold")
            line.append("] ", style="dim")
            line.append(branch.name, style="bold blue")
            line.append(format_ahead_behind(ahead_behind))
        else:
            line.append(str(branch.index), style="bold")
            line.append("] ", style="dim")
            line.append(branch.name, style="blue")
        console.print(line, soft_wrap=True)
    console.print()


def render_diff_heading(entries: Sequence[FileEntry]) -> None:
    console = _stdout()
    console.print(f"Showing diff for {len(entries)} file(s):")
    for entry in entries:
        console.print(Text(f"  [{entry.index}] {entry.path}"), soft_wrap=True)
    console.print()


def render_diff(entry: FileEntry, diff_text: str, *, banner: bool) -> None:
    console = _stdout()
    if banner:
        console.print(Text(f"═══ {entry.path} ═══", style="bold bright_blue"), soft_wrap=True)
    if entry.status is FileStatus.UNTRACKED:
        console.print(Text(f"File is untracked: {entry.path}. No diff to show."))
        return
    if not diff_text.strip():
        console.print(Text(f"No changes to show for {entry.path}"))
        return
    console.print(Syntax(diff_text.rstrip("\n"), "diff", theme="ansi_dark", background_color="default"))


# ── messages ─────────────────────────────────────────────────────────────────


def print_success(message: str) -> None:
    _stdout().print(Text(f"✓ {message}", style="green"), soft_wrap=True)


def print_info(message: str) -> None:
    _stdout().print(Text(message, style="bold"), soft_wrap=True)


def print_warning(message: str) -> None:
    _stderr().print(Text(f"⚠  {message}", style="yellow"), soft_wrap=True)


def print_error(message: str) -> None:
    line = Text("✕ Error: ", style="bold red")
    line.append(message)
    _stderr().print(line, soft_wrap=True)


def print_usage_error(
    message: str,
    usage: Sequence[str],
    options: Sequence[Tuple[str, str]] = (("-h, --help", "Show this help message"),),
) -> None:
    """Error line followed by usage patterns and options."""
    console = _stderr()
    line = Text("✕ Error: ", style="bold red")
    line.append(f"{message}.")
    console.print(line, soft_wrap=True)
    console.print(Text("Usage:", style="blue"))
    for pattern in usage:
        console.print(Text(f"  {pattern}"))
    if options:
        console.print(Text("Options:", style="blue"))
        for flag, description in options:
            console.print(Text(f"  {flag}  {description}", style="dim"))
