"""Resolve path-like terminal text to files with line/column positions."""

from .cwd import CwdRelativeRewriter
from .exceptions import SettingsError
from .exceptions import TerminalLinkError
from .exceptions import UnresolvedLinkError
from .grammar import LinkGrammar
from .grammar import get_grammar
from .line_column import LineColumnExtractor
from .line_column import extract_line_column
from .matcher import MatchResolver
from .matcher import strip_position_suffix
from .models import AmbiguousOrMissing
from .models import BaseDirectory
from .models import ExactMatch
from .models import FileStat
from .models import LineColumnInfo
from .models import LinkFragment
from .models import OpenOptions
from .models import OperatingSystem
from .models import PathCandidate
from .models import ResolutionOutcome
from .models import Resource
from .models import SearchResults
from .models import TerminalLink
from .normalizer import PathNormalizer
from .openers import FolderInWorkspaceLinkOpener
from .openers import LocalFileLinkOpener
from .openers import SearchLinkOpener
from .protocol import CwdDetectionProtocol
from .protocol import EditorServiceProtocol
from .protocol import ExplorerServiceProtocol
from .protocol import FileServiceProtocol
from .protocol import LinkOpenerProtocol
from .protocol import QuickAccessProtocol
from .protocol import SearchServiceProtocol
from .resolver import LinkResolver

__all__ = [
    # Models
    "AmbiguousOrMissing",
    "BaseDirectory",
    "ExactMatch",
    "FileStat",
    "LineColumnInfo",
    "LinkFragment",
    "OpenOptions",
    "OperatingSystem",
    "PathCandidate",
    "ResolutionOutcome",
    "Resource",
    "SearchResults",
    "TerminalLink",
    # Resolvers
    "CwdRelativeRewriter",
    "LineColumnExtractor",
    "LinkGrammar",
    "LinkResolver",
    "MatchResolver",
    "PathNormalizer",
    "extract_line_column",
    "get_grammar",
    "strip_position_suffix",
    # Openers
    "FolderInWorkspaceLinkOpener",
    "LocalFileLinkOpener",
    "SearchLinkOpener",
    # Protocols
    "CwdDetectionProtocol",
    "EditorServiceProtocol",
    "ExplorerServiceProtocol",
    "FileServiceProtocol",
    "LinkOpenerProtocol",
    "QuickAccessProtocol",
    "SearchServiceProtocol",
    # Exceptions
    "SettingsError",
    "TerminalLinkError",
    "UnresolvedLinkError",
]
