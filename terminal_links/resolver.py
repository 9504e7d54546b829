"""End-to-end resolution of terminal link text."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .cwd import CwdRelativeRewriter
from .line_column import LineColumnExtractor
from .matcher import DEFAULT_MAX_RESULTS
from .matcher import MatchResolver
from .models import BaseDirectory
from .models import LinkFragment
from .models import OperatingSystem
from .models import PathCandidate
from .models import ResolutionOutcome
from .normalizer import PathNormalizer
from .protocol import CwdDetectionProtocol
from .protocol import FileServiceProtocol
from .protocol import SearchServiceProtocol

logger = logging.getLogger(__name__)


class LinkResolver:
    """Resolve a link fragment to a single file, or give up cleanly.

    Data flow: the position is extracted from the raw text, the text is
    normalized, optionally rewritten against the cwd of its terminal row,
    and finally matched against the file system.

    The resolver holds no per-call state, so concurrent ``resolve`` calls
    are safe.
    """

    def __init__(
        self,
        file_service: FileServiceProtocol,
        search_service: SearchServiceProtocol,
        workspace_folders: Sequence[BaseDirectory] = (),
        *,
        os: OperatingSystem | None = None,
        cwd_detection: CwdDetectionProtocol | None = None,
        remote_authority: str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self.os = OperatingSystem(os) if os is not None else OperatingSystem.host()
        self.workspace_folders = tuple(workspace_folders)
        self.cwd_detection = cwd_detection
        self.remote_authority = remote_authority
        self.extractor = LineColumnExtractor(self.os)
        self.normalizer = PathNormalizer(self.os)
        self.rewriter = CwdRelativeRewriter(self.os.separator)
        self.matcher = MatchResolver(file_service, search_service, self.os, max_results)

    def prepare(self, fragment: LinkFragment) -> PathCandidate:
        """Build the candidate handed to the matcher, without any I/O."""
        line_column = self.extractor.extract(fragment.text)
        normalized = self.normalizer.normalize(fragment.text, self.workspace_folders)

        match_path = normalized.raw_path
        if self.cwd_detection is not None and fragment.row is not None:
            cwd = self.cwd_detection.get_cwd_for_line(fragment.row)
            match_path = self.rewriter.rewrite(normalized.raw_path, cwd) or normalized.raw_path

        return PathCandidate(raw_path=match_path, line_column=line_column, source_text=fragment.text)

    async def resolve(self, fragment: LinkFragment | str) -> ResolutionOutcome:
        """Resolve link text to an ExactMatch or AmbiguousOrMissing."""
        if isinstance(fragment, str):
            fragment = LinkFragment(text=fragment)
        candidate = self.prepare(fragment)
        logger.debug(f"Resolving {fragment.text!r} as {candidate.raw_path!r}")
        return await self.matcher.resolve(candidate, self.workspace_folders, self.remote_authority)
