"""Tests for the shared index-command initialization."""

from pathlib import Path

import pytest

from gitnav.cache.store import CacheStore
from gitnav.errors import (
    CacheLoadError,
    CacheNotFoundError,
    IndexOutOfRangeError,
    InvalidNumberError,
    NoIndicesProvidedError,
    NotInGitRepoError,
    NothingAvailableError,
    NoValidIndicesError,
)
from gitnav.git.models import FileEntry
from gitnav.index.context import initialize
from gitnav.snapshot.builder import build_branch_snapshot, build_file_snapshot
from conftest import git


@pytest.fixture
def store(tmp_path_factory) -> CacheStore:
    return CacheStore.at(tmp_path_factory.mktemp("cache"))


def _factory(store: CacheStore):
    return lambda _root: store


class TestPrecedence:
    def test_missing_args_checked_before_repository(self, tmp_path_factory, store):
        outside = tmp_path_factory.mktemp("not-a-repo")
        with pytest.raises(NoIndicesProvidedError):
            initialize([], store_factory=_factory(store), cwd=outside)

    def test_not_in_repository(self, tmp_path_factory, store):
        outside = tmp_path_factory.mktemp("not-a-repo")
        with pytest.raises(NotInGitRepoError):
            initialize(["1"], store_factory=_factory(store), cwd=outside)

    def test_missing_cache_is_wrapped(self, dirty_git_repo: Path, store):
        with pytest.raises(CacheLoadError) as exc_info:
            initialize(
                ["1"],
                store_factory=_factory(store),
                cwd=dirty_git_repo,
                cache_error_msg="Cannot load file cache",
            )
        assert isinstance(exc_info.value.cause, CacheNotFoundError)
        assert str(exc_info.value).startswith("Cannot load file cache: ")

    def test_cache_checked_before_parsing(self, dirty_git_repo: Path, store):
        # bad syntax, but the missing cache is reported first
        with pytest.raises(CacheLoadError):
            initialize(["abc"], store_factory=_factory(store), cwd=dirty_git_repo)

    def test_empty_cache(self, tmp_git_repo: Path, store):
        store.save(build_file_snapshot(tmp_git_repo))
        with pytest.raises(NothingAvailableError) as exc_info:
            initialize(
                ["1"],
                store_factory=_factory(store),
                cwd=tmp_git_repo,
                empty_msg="No files available to add",
            )
        assert "No files available to add" in str(exc_info.value)
        assert "gitnav status" in str(exc_info.value)

    def test_separators_only(self, dirty_git_repo: Path, store):
        store.save(build_file_snapshot(dirty_git_repo))
        with pytest.raises(NoValidIndicesError):
            initialize([",", " "], store_factory=_factory(store), cwd=dirty_git_repo)

    def test_parse_error_passes_through(self, dirty_git_repo: Path, store):
        store.save(build_file_snapshot(dirty_git_repo))
        with pytest.raises(InvalidNumberError):
            initialize(["x"], store_factory=_factory(store), cwd=dirty_git_repo)

    def test_out_of_range(self, dirty_git_repo: Path, store):
        store.save(build_file_snapshot(dirty_git_repo))
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            initialize(["4"], store_factory=_factory(store), cwd=dirty_git_repo)
        assert exc_info.value.max_index == 3


class TestSelection:
    def test_resolves_files(self, dirty_git_repo: Path, store):
        store.save(build_file_snapshot(dirty_git_repo))
        ctx = initialize(["3", "1"], store_factory=_factory(store), cwd=dirty_git_repo)

        assert ctx.repo_root == dirty_git_repo.resolve()
        assert ctx.indices == [1, 3]
        assert ctx.paths == ["staged.txt", "untracked.txt"]
        assert ctx.entry_count == 3
        assert ctx.selected_count == 2
        assert all(isinstance(e, FileEntry) for e in ctx.selected)

    def test_works_from_subdirectory(self, dirty_git_repo: Path, store):
        sub = dirty_git_repo / "nested"
        sub.mkdir()
        store.save(build_file_snapshot(dirty_git_repo))
        ctx = initialize(["2"], store_factory=_factory(store), cwd=sub)
        assert ctx.paths == ["tracked.txt"]

    def test_branches_skip_current(self, tmp_git_repo: Path, store):
        git(tmp_git_repo, "branch", "alpha")
        git(tmp_git_repo, "branch", "beta")
        store.save(build_branch_snapshot(tmp_git_repo))
        ctx = initialize(
            ["2"], store_factory=_factory(store), cwd=tmp_git_repo, kind="branches",
        )
        assert [b.name for b in ctx.selected] == ["beta"]
        assert ctx.paths == []
