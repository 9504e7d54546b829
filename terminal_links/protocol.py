"""Capability protocols consumed by the link resolvers.

The resolvers never touch the file system, the editor or the search engine
directly. Hosts inject objects satisfying these protocols; any class with
matching methods works (no inheritance required).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from typing import runtime_checkable

from .models import BaseDirectory
from .models import FileStat
from .models import OpenOptions
from .models import Resource
from .models import SearchResults
from .models import TerminalLink


@runtime_checkable
class FileServiceProtocol(Protocol):
    """Stat access to resources."""

    async def stat(self, resource: Resource) -> FileStat:
        """Stat a resource.

        Raises:
            FileNotFoundError: If the resource does not exist.
        """
        ...


@runtime_checkable
class SearchServiceProtocol(Protocol):
    """Bounded file-name search across workspace folders."""

    async def file_search(
        self,
        pattern: str,
        roots: Sequence[BaseDirectory],
        max_results: int,
    ) -> SearchResults:
        """Return at most ``max_results`` files whose path matches ``pattern``."""
        ...


@runtime_checkable
class CwdDetectionProtocol(Protocol):
    """Command detection: the shell cwd at the time a line was printed."""

    def get_cwd_for_line(self, line: int) -> str | None:
        """Return the cwd for a terminal row, or None if unknown."""
        ...


@runtime_checkable
class EditorServiceProtocol(Protocol):
    """Opens resources in an editor."""

    async def open_editor(self, resource: Resource, options: OpenOptions) -> None: ...


@runtime_checkable
class ExplorerServiceProtocol(Protocol):
    """Reveals folders in a file browser."""

    async def reveal_in_explorer(self, resource: Resource) -> None: ...


@runtime_checkable
class QuickAccessProtocol(Protocol):
    """Interactive search prompt used as the last resort."""

    async def show(self, query: str) -> None: ...


@runtime_checkable
class LinkOpenerProtocol(Protocol):
    """Opens a detected terminal link."""

    async def open(self, link: TerminalLink) -> None: ...
