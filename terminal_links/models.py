"""Value types shared by the link resolvers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

FILE_SCHEME = "file"
REMOTE_SCHEME = "vscode-remote"


class OperatingSystem(str, Enum):
    """Path grammar family a link is interpreted with."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> OperatingSystem:
        """Return the grammar family of the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @property
    def separator(self) -> str:
        return "\\" if self is OperatingSystem.WINDOWS else "/"


@dataclass(frozen=True)
class LineColumnInfo:
    """1-based position inside a file."""

    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class LinkFragment:
    """Raw link text plus the terminal row it was emitted on, if known."""

    text: str
    row: int | None = None


@dataclass(frozen=True)
class BaseDirectory:
    """A workspace folder: display name and root path."""

    name: str
    root_path: str


@dataclass(frozen=True)
class PathCandidate:
    """A path with its position suffix already separated out.

    ``source_text`` keeps the untouched link text so a failed resolution can
    hand the least-mangled text to interactive search.
    """

    raw_path: str
    line_column: LineColumnInfo | None = None
    source_text: str | None = None


@dataclass(frozen=True)
class Resource:
    """A file-system resource addressed by scheme, authority and path."""

    scheme: str
    path: str
    authority: str = ""

    @classmethod
    def file(cls, path: str) -> Resource:
        return cls(scheme=FILE_SCHEME, path=path)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"


@dataclass(frozen=True)
class TerminalLink:
    """A detected link as handed to an opener.

    ``resource`` is set by upstream detection for links that were already
    validated against the file system; search links leave it empty.
    """

    text: str
    resource: Resource | None = None
    row: int | None = None

    @property
    def fragment(self) -> LinkFragment:
        return LinkFragment(text=self.text, row=self.row)


@dataclass(frozen=True)
class FileStat:
    """Result of a stat call."""

    resource: Resource
    is_file: bool
    is_directory: bool = False


@dataclass(frozen=True)
class SearchResults:
    """Result of a bounded file search."""

    results: list[Resource] = field(default_factory=list)
    limit_hit: bool = False


@dataclass(frozen=True)
class OpenOptions:
    """Editor options used when opening a resource."""

    pinned: bool = True
    reveal_if_opened: bool = True
    selection: LineColumnInfo | None = None


@dataclass(frozen=True)
class ExactMatch:
    """A single, file-system confirmed resource."""

    resource: Resource
    line_column: LineColumnInfo = field(default_factory=LineColumnInfo)


@dataclass(frozen=True)
class AmbiguousOrMissing:
    """No exact match; the caller should fall back to interactive search."""

    search_hint: str


ResolutionOutcome = ExactMatch | AmbiguousOrMissing
