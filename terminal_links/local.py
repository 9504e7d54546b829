"""Capability implementations backed by the local file system.

Used by the command line front end and handy for tests. Editors embed the
resolvers with their own services instead.
"""

from __future__ import annotations

import fnmatch
import os
import logging
from bisect import bisect_right
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from pathlib import Path
from pathlib import PurePosixPath
from pathlib import PureWindowsPath

from .models import BaseDirectory
from .models import FileStat
from .models import Resource
from .models import SearchResults

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_EXCLUDE = (".git", "node_modules")


class LocalFileService:
    """Stat ``file`` resources with pathlib."""

    async def stat(self, resource: Resource) -> FileStat:
        if resource.scheme != "file":
            raise ValueError(f"Unsupported scheme for local stat: {resource.scheme}")
        path = Path(resource.path)
        if not path.exists():
            raise FileNotFoundError(resource.path)
        return FileStat(resource=resource, is_file=path.is_file(), is_directory=path.is_dir())


class GlobFileSearch:
    """Bounded search for files whose trailing path segments equal a pattern.

    ``src/app.ts`` matches ``<root>/src/app.ts`` and ``<root>/pkg/src/app.ts``
    but not ``<root>/src/app.tsx``.

    Folders matching an ``exclude`` pattern are never entered.
    """

    def __init__(self, exclude: Iterable[str] = DEFAULT_SEARCH_EXCLUDE) -> None:
        self.exclude = tuple(exclude)

    async def file_search(
        self,
        pattern: str,
        roots: Sequence[BaseDirectory],
        max_results: int,
    ) -> SearchResults:
        segments = self._as_segments(pattern)
        if segments is None:
            return SearchResults()

        found: list[Resource] = []
        seen: set[Path] = set()
        for root in roots:
            base = Path(root.root_path)
            if not base.is_dir():
                logger.debug(f"Skipping missing workspace folder {base}")
                continue
            for dirpath, dirnames, filenames in os.walk(base):
                # Prune in place so excluded folders are never entered
                dirnames[:] = sorted(name for name in dirnames if not self._is_excluded(name))
                prefix = Path(dirpath).relative_to(base).parts
                for filename in sorted(filenames):
                    if filename != segments[-1] or self._is_excluded(filename):
                        continue
                    parts = prefix + (filename,)
                    if parts[-len(segments):] != segments:
                        continue
                    path = Path(dirpath, filename)
                    resolved = path.resolve()
                    if resolved in seen:
                        continue
                    seen.add(resolved)
                    found.append(Resource.file(str(path)))
                    if len(found) >= max_results:
                        return SearchResults(results=found, limit_hit=True)
        return SearchResults(results=found)

    def _as_segments(self, pattern: str) -> tuple[str, ...] | None:
        # Accept either separator
        parts = PureWindowsPath(pattern).parts if "\\" in pattern else PurePosixPath(pattern).parts
        if not parts or PurePosixPath(pattern).is_absolute() or PureWindowsPath(pattern).is_absolute():
            return None
        return tuple(parts)

    def _is_excluded(self, name: str) -> bool:
        return any(fnmatch.fnmatch(name, excluded) for excluded in self.exclude)


class MappingCwdDetection:
    """Command detection backed by a table of ``row -> cwd``.

    Each entry marks the row where a command started; a line belongs to the
    closest command at or above it.
    """

    def __init__(self, cwds: Mapping[int, str]) -> None:
        self._rows = sorted(cwds)
        self._cwds = dict(cwds)

    def get_cwd_for_line(self, line: int) -> str | None:
        index = bisect_right(self._rows, line)
        if index == 0:
            return None
        return self._cwds[self._rows[index - 1]]
