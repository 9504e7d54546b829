"""
Testing utilities for terminal-links.
Provides in-memory capability fakes for resolver and opener tests.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from unittest.mock import AsyncMock

from .models import FileStat
from .models import Resource
from .models import SearchResults


class FakeFileService:
    """In-memory file system keyed by path; values say whether it is a file."""

    def __init__(self, entries: Mapping[str, bool] | None = None):
        self.entries = dict(entries or {})
        self.stat = AsyncMock(side_effect=self._stat)

    async def _stat(self, resource: Resource) -> FileStat:
        if resource.path not in self.entries:
            raise FileNotFoundError(resource.path)
        is_file = self.entries[resource.path]
        return FileStat(resource=resource, is_file=is_file, is_directory=not is_file)


class MockSearchService:
    """Search service returning a canned list of paths."""

    def __init__(self, paths: Iterable[str] = (), error: Exception | None = None):
        self.paths = list(paths)
        self.file_search = AsyncMock(side_effect=error or self._file_search)

    async def _file_search(self, pattern, roots, max_results) -> SearchResults:
        results = [Resource.file(path) for path in self.paths[:max_results]]
        return SearchResults(results=results, limit_hit=len(self.paths) > max_results)


class MockEditorService:
    """Records opened editors."""

    def __init__(self):
        self.open_editor = AsyncMock()


class MockExplorerService:
    """Records revealed folders."""

    def __init__(self):
        self.reveal_in_explorer = AsyncMock()


class MockQuickAccess:
    """Records interactive search queries."""

    def __init__(self):
        self.show = AsyncMock()
