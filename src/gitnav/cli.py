"""gitnav CLI: Typer application with status, add, reset, checkout, diff, branches and init."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import typer

from gitnav import __version__
from gitnav.errors import NavigatorError, NoIndicesProvidedError

app = typer.Typer(
    name="gitnav",
    help="Numbered git status: act on files and branches by index.",
    add_completion=False,
    no_args_is_help=True,
)

log = logging.getLogger(__name__)

_INDEX_HELP = "File indices from the last listing, e.g. 1 3 5, 1-3 or 1,3,5"


@contextmanager
def _reported(usage: Sequence[str] = ()) -> Iterator[None]:
    """Print a NavigatorError once and exit with its exit code."""
    from gitnav.output.terminal import print_error, print_usage_error

    try:
        yield
    except NoIndicesProvidedError as exc:
        if usage:
            print_usage_error(str(exc), usage)
        else:
            print_error(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except NavigatorError as exc:
        log.debug("Command failed", exc_info=True)
        print_error(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def _resolve_repo_root() -> Path:
    from gitnav.git.adapter import find_repo_root

    return find_repo_root()


def _load_config(repo_root: Optional[Path]):
    from gitnav.config.loader import load_config
    from gitnav.dirs import default_config_root

    return load_config(repo_root, user_dir=default_config_root())


def _store_for(cfg):
    from gitnav.cache.store import CacheStore
    from gitnav.dirs import default_cache_root

    return CacheStore.at(default_cache_root(cfg.cache.directory))


def _store_factory(repo_root: Path):
    return _store_for(_load_config(repo_root))


def _output_format(cfg, override: Optional[str]) -> str:
    from gitnav.config.loader import ConfigError
    from gitnav.config.schema import OUTPUT_FORMATS

    if override is None:
        return cfg.output.format
    if override not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid format: {override} (expected one of: {', '.join(OUTPUT_FORMATS)})")
    return override


def _save_snapshot(store, snapshot) -> None:
    """Write the snapshot; a failed write only costs the next command its numbers."""
    from gitnav.errors import CacheWriteError
    from gitnav.output.terminal import print_warning

    try:
        store.save(snapshot)
    except CacheWriteError as exc:
        print_warning(f"Could not save listing: {exc}")


def _status_header(repo_root: Path):
    from gitnav.git.adapter import describe_head, get_ahead_behind, get_parent_commit
    from gitnav.output.terminal import StatusHeader

    return StatusHeader(
        branch=describe_head(repo_root),
        ahead_behind=get_ahead_behind(repo_root),
        parent=get_parent_commit(repo_root),
    )


def _check_staleness(selected, fresh, mode: str) -> None:
    from gitnav.errors import StaleSelectionError
    from gitnav.output.terminal import print_warning
    from gitnav.snapshot.staleness import find_stale

    if mode == "off":
        return
    stale = find_stale(selected, fresh)
    if not stale:
        return
    paths = [entry.path for entry in stale]
    if mode == "error":
        raise StaleSelectionError(paths)
    print_warning(
        f"Listing is out of date for: {', '.join(paths)}. Run 'gitnav status' to renumber."
    )


def _show_updated_status(repo_root: Path, store) -> None:
    """Re-list after a mutation and refresh the cache so the new numbers are valid."""
    from gitnav.output.terminal import print_info, render_status
    from gitnav.snapshot.builder import build_file_snapshot

    snapshot = build_file_snapshot(repo_root)
    print_info("\nUpdated status:")
    render_status(snapshot.entries)
    _save_snapshot(store, snapshot)


def _run_file_action(
    indices: Optional[List[str]],
    *,
    verb: str,
    usage: Sequence[str],
    require_changes: bool,
) -> None:
    """Shared flow for add / reset / checkout by index."""
    from gitnav.errors import NoChangesError
    from gitnav.git.adapter import add_paths, checkout_paths, reset_paths
    from gitnav.index.context import initialize
    from gitnav.output.terminal import print_success
    from gitnav.snapshot.builder import build_file_snapshot

    actions = {
        "add": (add_paths, "added {n} file(s) to git index", "added"),
        "reset": (reset_paths, "unstaged {n} file(s)", "reset"),
        "checkout": (checkout_paths, "restored {n} file(s) from git index", "checked out"),
    }
    action, done, participle = actions[verb]

    with _reported(usage):
        ctx = initialize(
            indices,
            store_factory=_store_factory,
            cache_error_msg="Cannot load file cache",
            empty_msg=f"No files available to {verb}",
        )
        cfg = _load_config(ctx.repo_root)
        fresh = build_file_snapshot(ctx.repo_root)
        if require_changes and fresh.is_empty:
            raise NoChangesError(f"There are no changes to be {participle}")
        _check_staleness(ctx.selected, fresh, cfg.cache.stale_check)

        log.debug("%s %s", verb, ctx.paths)
        action(ctx.repo_root, ctx.paths)
        print_success("Successfully " + done.format(n=ctx.selected_count) + ".")
        _show_updated_status(ctx.repo_root, _store_for(cfg))


def _looks_like_indices(target: str) -> bool:
    return bool(target) and all(ch.isdigit() or ch in ",- " for ch in target)


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Show changed files, numbered for add / reset / checkout / diff."""
    from gitnav.git.adapter import describe_head, get_ahead_behind
    from gitnav.output import json_report
    from gitnav.output.terminal import render_status
    from gitnav.snapshot.builder import build_file_snapshot

    with _reported():
        repo_root = _resolve_repo_root()
        cfg = _load_config(repo_root)
        fmt = _output_format(cfg, format)

        snapshot = build_file_snapshot(repo_root)
        if fmt == "json":
            print(
                json_report.render(
                    snapshot,
                    branch=describe_head(repo_root),
                    ahead_behind=get_ahead_behind(repo_root),
                )
            )
        else:
            header = _status_header(repo_root) if cfg.output.show_header else None
            render_status(snapshot.entries, header)

        _save_snapshot(_store_for(cfg), snapshot)


# ── add / reset ───────────────────────────────────────────────────────────────


@app.command()
def add(
    indices: Optional[List[str]] = typer.Argument(None, help=_INDEX_HELP),
) -> None:
    """Stage files by index."""
    _run_file_action(
        indices,
        verb="add",
        usage=("gitnav add <index>...", "gitnav add 1 3 5", "gitnav add 1-3"),
        require_changes=True,
    )


@app.command()
def reset(
    indices: Optional[List[str]] = typer.Argument(None, help=_INDEX_HELP),
) -> None:
    """Unstage files by index."""
    _run_file_action(
        indices,
        verb="reset",
        usage=("gitnav reset <index>...", "gitnav reset 1 3 5", "gitnav reset 1-3"),
        require_changes=False,
    )


# ── checkout ──────────────────────────────────────────────────────────────────

_CHECKOUT_USAGE = (
    "gitnav checkout <index>...",
    "gitnav checkout <branch>",
    "gitnav checkout -b <new-branch>",
)


@app.command()
def checkout(
    targets: Optional[List[str]] = typer.Argument(None, help="File indices, or a branch name"),
    create: bool = typer.Option(False, "-b", "--create", help="Create the branch and switch to it"),
) -> None:
    """Discard working tree changes by index, or switch branches."""
    from gitnav.git.adapter import checkout_branch, create_branch
    from gitnav.output.terminal import print_success, print_usage_error

    targets = targets or []

    if create:
        if len(targets) != 1:
            print_usage_error("Option -b takes exactly one branch name", _CHECKOUT_USAGE)
            raise typer.Exit(code=1)
        with _reported():
            repo_root = _resolve_repo_root()
            create_branch(repo_root, targets[0])
            print_success(f"Switched to a new branch '{targets[0]}'")
        return

    if len(targets) == 1 and not _looks_like_indices(targets[0]):
        with _reported():
            repo_root = _resolve_repo_root()
            checkout_branch(repo_root, targets[0])
            print_success(f"Switched to branch '{targets[0]}'")
        return

    _run_file_action(targets, verb="checkout", usage=_CHECKOUT_USAGE, require_changes=True)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    indices: Optional[List[str]] = typer.Argument(None, help=_INDEX_HELP),
) -> None:
    """Show the diff of files by index."""
    from gitnav.git.adapter import diff_file
    from gitnav.git.models import FileEntry, FileStatus
    from gitnav.index.context import initialize
    from gitnav.output.terminal import render_diff, render_diff_heading

    usage = ("gitnav diff <index>...", "gitnav diff 1 3 5", "gitnav diff 1-3")
    with _reported(usage):
        ctx = initialize(
            indices,
            store_factory=_store_factory,
            cache_error_msg="Cannot load file cache",
            empty_msg="No files available to diff",
        )
        entries = [entry for entry in ctx.selected if isinstance(entry, FileEntry)]
        banner = len(entries) > 1
        if banner:
            render_diff_heading(entries)

        for entry in entries:
            if entry.status is FileStatus.UNTRACKED:
                render_diff(entry, "", banner=banner)
                continue
            # A deletion is shown against HEAD whether or not it is staged.
            deleted = entry.status is FileStatus.DELETED
            text = diff_file(
                ctx.repo_root,
                entry.path,
                staged=entry.staged and not deleted,
                against_head=entry.staged or deleted,
            )
            render_diff(entry, text, banner=banner)


# ── branches ──────────────────────────────────────────────────────────────────


@app.command()
def branches(
    index: Optional[int] = typer.Argument(None, help="Switch to the branch with this number"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """List local branches, numbered; pass a number to switch to that branch."""
    from gitnav.errors import NoChangesError
    from gitnav.git.adapter import checkout_branch, get_ahead_behind, get_current_branch
    from gitnav.index.context import initialize
    from gitnav.output import json_report
    from gitnav.output.terminal import print_success, render_branches
    from gitnav.snapshot.builder import build_branch_snapshot

    with _reported():
        if index is None:
            repo_root = _resolve_repo_root()
            cfg = _load_config(repo_root)
            fmt = _output_format(cfg, format)
            snapshot = build_branch_snapshot(repo_root)
            ahead_behind = get_ahead_behind(repo_root)
            if fmt == "json":
                current = snapshot.current_branch
                print(
                    json_report.render(
                        snapshot,
                        branch=current.name if current else None,
                        ahead_behind=ahead_behind,
                    )
                )
            else:
                render_branches(snapshot.entries, ahead_behind)
            _save_snapshot(_store_for(cfg), snapshot)
            return

        ctx = initialize(
            [str(index)],
            store_factory=_store_factory,
            kind="branches",
            cache_error_msg="Cannot load branch cache",
            empty_msg="No other branches to switch to",
        )
        target = ctx.selected[0]
        if target.name == get_current_branch(ctx.repo_root):
            raise NoChangesError(f"Already on branch '{target.name}'")
        checkout_branch(ctx.repo_root, target.name)
        print_success(f"Switched to branch '{target.name}'")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitnav.toml in the repo root."""
    from gitnav.config.defaults import DEFAULT_TOML
    from gitnav.config.loader import REPO_CONFIG_NAME
    from gitnav.output.terminal import print_success, print_warning

    with _reported():
        repo_root = _resolve_repo_root()
    config_path = repo_root / REPO_CONFIG_NAME

    if config_path.exists():
        print_warning(f"{REPO_CONFIG_NAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    print_success(f"Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitnav {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log git invocations and cache activity"),
) -> None:
    """gitnav: numbered git status, add, reset, checkout, diff and branches."""
    from gitnav.logging_setup import configure_logging

    configure_logging(debug)
