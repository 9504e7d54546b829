"""Tests for the exact-match decision."""

from unittest.mock import AsyncMock

import pytest

from terminal_links.matcher import MatchResolver
from terminal_links.matcher import strip_position_suffix
from terminal_links.models import AmbiguousOrMissing
from terminal_links.models import BaseDirectory
from terminal_links.models import ExactMatch
from terminal_links.models import LineColumnInfo
from terminal_links.models import OperatingSystem
from terminal_links.models import PathCandidate
from terminal_links.models import Resource
from terminal_links.testing import FakeFileService
from terminal_links.testing import MockSearchService

ROOTS = [BaseDirectory(name="proj", root_path="/home/u/proj")]


def _resolver(files=None, search=None, os=OperatingSystem.POSIX) -> MatchResolver:
    return MatchResolver(FakeFileService(files), search or MockSearchService(), os)


class TestStripPositionSuffix:
    """Tests for strip_position_suffix."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a.ts:1:2", "a.ts"),
            ("a.ts:1", "a.ts"),
            ("a.ts", "a.ts"),
            ("a.ts:x", "a.ts:x"),
            ("a:1:2:3", "a:1"),
            ("a.ts:٣٤", "a.ts:٣٤"),
        ],
    )
    def test_strip(self, path: str, expected: str) -> None:
        """Only one trailing :line[:col] is removed."""
        assert strip_position_suffix(path) == expected


class TestMatchResolver:
    """Tests for MatchResolver.resolve."""

    @pytest.mark.asyncio
    async def test_absolute_file_matches_without_search(self) -> None:
        """An existing absolute file is an exact match; search is skipped."""
        search = MockSearchService()
        resolver = _resolver({"/home/u/a.ts": True}, search)
        candidate = PathCandidate("/home/u/a.ts:3:4", LineColumnInfo(3, 4), source_text="/home/u/a.ts:3:4")

        outcome = await resolver.resolve(candidate, ROOTS)

        assert outcome == ExactMatch(Resource.file("/home/u/a.ts"), LineColumnInfo(3, 4))
        search.file_search.assert_not_called()

    @pytest.mark.asyncio
    async def test_remote_authority_uses_remote_scheme(self) -> None:
        """Absolute paths on a remote workspace get the remote scheme."""
        files = FakeFileService({"/srv/a.py": True})
        resolver = MatchResolver(files, MockSearchService(), OperatingSystem.POSIX)

        outcome = await resolver.resolve(PathCandidate("/srv/a.py"), ROOTS, remote_authority="ssh-remote+box")

        assert isinstance(outcome, ExactMatch)
        assert outcome.resource == Resource(scheme="vscode-remote", path="/srv/a.py", authority="ssh-remote+box")
        assert str(outcome.resource) == "vscode-remote://ssh-remote+box/srv/a.py"

    @pytest.mark.asyncio
    async def test_missing_absolute_falls_through_to_search(self) -> None:
        """A missing absolute path is searched for."""
        search = MockSearchService(["/home/u/proj/a.ts"])
        resolver = _resolver({}, search)

        outcome = await resolver.resolve(PathCandidate("/tmp/a.ts"), ROOTS)

        assert outcome == ExactMatch(Resource.file("/home/u/proj/a.ts"), LineColumnInfo(1, 1))
        search.file_search.assert_awaited_once_with("/tmp/a.ts", ROOTS, 2)

    @pytest.mark.asyncio
    async def test_absolute_directory_falls_through_to_search(self) -> None:
        """A directory is not a file match."""
        search = MockSearchService()
        resolver = _resolver({"/home/u/proj": False}, search)

        outcome = await resolver.resolve(PathCandidate("/home/u/proj", source_text="/home/u/proj"), ROOTS)

        assert outcome == AmbiguousOrMissing(search_hint="/home/u/proj")
        search.file_search.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_single_search_result_is_exact(self) -> None:
        """Exactly one search hit is an exact match."""
        search = MockSearchService(["/home/u/proj/src/a.ts"])
        resolver = _resolver({}, search)
        candidate = PathCandidate("src/a.ts:9", LineColumnInfo(9, 1), source_text="src/a.ts:9")

        outcome = await resolver.resolve(candidate, ROOTS)

        assert outcome == ExactMatch(Resource.file("/home/u/proj/src/a.ts"), LineColumnInfo(9, 1))
        search.file_search.assert_awaited_once_with("src/a.ts", ROOTS, 2)

    @pytest.mark.asyncio
    async def test_two_results_are_ambiguous(self) -> None:
        """Two hits cannot be told apart."""
        search = MockSearchService(["/p/a/util.py", "/p/b/util.py"])
        outcome = await _resolver({}, search).resolve(PathCandidate("util.py", source_text="./util.py"), ROOTS)
        assert outcome == AmbiguousOrMissing(search_hint="./util.py")

    @pytest.mark.asyncio
    async def test_no_results_is_missing(self) -> None:
        """No hits means fallback."""
        outcome = await _resolver().resolve(PathCandidate("nope.ts", source_text="nope.ts"), ROOTS)
        assert outcome == AmbiguousOrMissing(search_hint="nope.ts")

    @pytest.mark.asyncio
    async def test_search_failure_is_folded(self) -> None:
        """A failing search capability yields fallback, not an exception."""
        search = MockSearchService(error=RuntimeError("search crashed"))
        outcome = await _resolver({}, search).resolve(PathCandidate("a.ts", source_text="a.ts"), ROOTS)
        assert outcome == AmbiguousOrMissing(search_hint="a.ts")

    @pytest.mark.asyncio
    async def test_stat_failure_is_folded(self) -> None:
        """A stat error other than not-found yields fallback without searching."""
        files = FakeFileService()
        files.stat = AsyncMock(side_effect=PermissionError("denied"))
        search = MockSearchService(["/x/a.ts"])
        resolver = MatchResolver(files, search, OperatingSystem.POSIX)

        outcome = await resolver.resolve(PathCandidate("/x/a.ts", source_text="/x/a.ts"), ROOTS)

        assert outcome == AmbiguousOrMissing(search_hint="/x/a.ts")
        search.file_search.assert_not_called()

    @pytest.mark.asyncio
    async def test_hint_defaults_to_raw_path(self) -> None:
        """Without source text the raw path is the hint."""
        outcome = await _resolver().resolve(PathCandidate("a.ts:3"), ROOTS)
        assert outcome == AmbiguousOrMissing(search_hint="a.ts:3")

    @pytest.mark.asyncio
    async def test_custom_max_results(self) -> None:
        """The search bound is configurable."""
        search = MockSearchService()
        resolver = MatchResolver(FakeFileService(), search, OperatingSystem.POSIX, max_results=5)
        await resolver.resolve(PathCandidate("a.ts"), ROOTS)
        search.file_search.assert_awaited_once_with("a.ts", ROOTS, 5)


class TestIsAbsolute:
    """Tests for OS-specific absolute path detection."""

    def test_posix(self) -> None:
        """POSIX absolute paths start with a slash."""
        resolver = _resolver()
        assert resolver.is_absolute("/a/b")
        assert not resolver.is_absolute("a/b")

    def test_windows(self) -> None:
        """Windows absolute paths carry a drive and root."""
        resolver = _resolver(os=OperatingSystem.WINDOWS)
        assert resolver.is_absolute("C:\\a\\b")
        assert not resolver.is_absolute("a\\b")
