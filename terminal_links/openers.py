"""Openers for the different kinds of terminal links."""

from __future__ import annotations

import logging

from .exceptions import UnresolvedLinkError
from .line_column import LineColumnExtractor
from .models import ExactMatch
from .models import OpenOptions
from .models import OperatingSystem
from .models import TerminalLink
from .protocol import EditorServiceProtocol
from .protocol import ExplorerServiceProtocol
from .protocol import QuickAccessProtocol
from .resolver import LinkResolver

logger = logging.getLogger(__name__)


class LocalFileLinkOpener:
    """Open a link whose file was already resolved by link detection."""

    def __init__(self, editor_service: EditorServiceProtocol, os: OperatingSystem | None = None) -> None:
        self.editor_service = editor_service
        self.extractor = LineColumnExtractor(os)

    async def open(self, link: TerminalLink) -> None:
        """Open ``link.resource`` at the position found in the link text.

        Raises:
            UnresolvedLinkError: If the link has no resource.
        """
        if link.resource is None:
            raise UnresolvedLinkError(link.text, "file")
        selection = self.extractor.extract(link.text)
        logger.debug(f"Opening {link.resource} at {selection.line}:{selection.column}")
        await self.editor_service.open_editor(
            link.resource,
            OpenOptions(pinned=True, reveal_if_opened=True, selection=selection),
        )


class FolderInWorkspaceLinkOpener:
    """Reveal a folder link in the file browser."""

    def __init__(self, explorer_service: ExplorerServiceProtocol) -> None:
        self.explorer_service = explorer_service

    async def open(self, link: TerminalLink) -> None:
        if link.resource is None:
            raise UnresolvedLinkError(link.text, "folder")
        await self.explorer_service.reveal_in_explorer(link.resource)


class SearchLinkOpener:
    """Open a link that only looks like a path.

    Opens the file when resolution finds exactly one, otherwise hands the
    link text to the interactive search prompt.
    """

    def __init__(
        self,
        resolver: LinkResolver,
        editor_service: EditorServiceProtocol,
        quick_access: QuickAccessProtocol,
    ) -> None:
        self.resolver = resolver
        self.editor_service = editor_service
        self.quick_access = quick_access

    async def open(self, link: TerminalLink) -> None:
        outcome = await self.resolver.resolve(link.fragment)
        if isinstance(outcome, ExactMatch):
            logger.debug(f"Opening exact match {outcome.resource}")
            await self.editor_service.open_editor(
                outcome.resource,
                OpenOptions(pinned=True, reveal_if_opened=True, selection=outcome.line_column),
            )
            return

        logger.debug(f"No exact match, showing quick access for {outcome.search_hint!r}")
        await self.quick_access.show(outcome.search_hint)
