"""Exact-match decision for normalized link paths."""

from __future__ import annotations

import logging
import ntpath
import posixpath
import re
from collections.abc import Sequence

from .models import FILE_SCHEME
from .models import REMOTE_SCHEME
from .models import AmbiguousOrMissing
from .models import BaseDirectory
from .models import ExactMatch
from .models import LineColumnInfo
from .models import OperatingSystem
from .models import PathCandidate
from .models import ResolutionOutcome
from .models import Resource
from .protocol import FileServiceProtocol
from .protocol import SearchServiceProtocol

logger = logging.getLogger(__name__)

# Two results are enough to tell "exactly one" from "ambiguous"
DEFAULT_MAX_RESULTS = 2

_POSITION_SUFFIX_PATTERN = re.compile(r":[0-9]+(:[0-9]+)?$")


def strip_position_suffix(path: str) -> str:
    """Remove a trailing ``:line`` or ``:line:col`` from ``path``."""
    return _POSITION_SUFFIX_PATTERN.sub("", path)


class MatchResolver:
    """Decide whether a path candidate names exactly one file.

    An absolute candidate is checked with a stat call first. Anything else,
    or an absolute path that is not a file, goes through one bounded search
    across the workspace folders. Exactly one search hit is an exact match;
    zero or several hits, or any capability failure, yield
    ``AmbiguousOrMissing``.
    """

    def __init__(
        self,
        file_service: FileServiceProtocol,
        search_service: SearchServiceProtocol,
        os: OperatingSystem | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self.file_service = file_service
        self.search_service = search_service
        self.os = OperatingSystem(os) if os is not None else OperatingSystem.host()
        self.max_results = max_results

    def is_absolute(self, path: str) -> bool:
        pathmod = ntpath if self.os is OperatingSystem.WINDOWS else posixpath
        return pathmod.isabs(path)

    async def resolve(
        self,
        candidate: PathCandidate,
        workspace_roots: Sequence[BaseDirectory],
        remote_authority: str | None = None,
    ) -> ResolutionOutcome:
        """Resolve a candidate to an exact match or signal fallback.

        Args:
            candidate: Normalized (and possibly cwd-rewritten) path.
            workspace_roots: Folders to search.
            remote_authority: Set when the workspace lives on a remote host.

        Returns:
            ExactMatch or AmbiguousOrMissing. Never raises for capability
            failures.
        """
        sanitized = strip_position_suffix(candidate.raw_path)
        search_hint = candidate.source_text if candidate.source_text is not None else candidate.raw_path

        try:
            resource = await self._get_exact_match(sanitized, workspace_roots, remote_authority)
        except Exception:
            logger.debug(f"Lookup failed for {sanitized!r}, returning no match", exc_info=True)
            return AmbiguousOrMissing(search_hint=search_hint)

        if resource is None:
            return AmbiguousOrMissing(search_hint=search_hint)
        return ExactMatch(resource=resource, line_column=candidate.line_column or LineColumnInfo())

    async def _get_exact_match(
        self,
        sanitized: str,
        workspace_roots: Sequence[BaseDirectory],
        remote_authority: str | None,
    ) -> Resource | None:
        if self.is_absolute(sanitized):
            scheme = REMOTE_SCHEME if remote_authority else FILE_SCHEME
            resource = Resource(scheme=scheme, path=sanitized, authority=remote_authority or "")
            try:
                stat = await self.file_service.stat(resource)
            except FileNotFoundError:
                logger.debug(f"{resource} does not exist")
            else:
                if stat.is_file:
                    logger.debug(f"Exact match by stat: {resource}")
                    return resource

        results = await self.search_service.file_search(sanitized, workspace_roots, self.max_results)
        if len(results.results) == 1:
            logger.debug(f"Exact match by search: {results.results[0]}")
            return results.results[0]
        logger.debug(f"Search for {sanitized!r} returned {len(results.results)} result(s)")
        return None
