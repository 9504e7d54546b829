"""Normalization of raw link text into a searchable path."""

from __future__ import annotations

import ntpath
import posixpath
import re
from collections.abc import Sequence

from .models import BaseDirectory
from .models import OperatingSystem
from .models import PathCandidate

_FILE_SCHEME_PATTERN = re.compile(r"^file:\/\/\/?")
_RELATIVE_LEADER_PATTERN = re.compile(r"^(\.+[\\/])+")
# Ruby stack traces end file references with ``:in``
_TRAILING_MARKER_PATTERN = re.compile(r":in$")


class PathNormalizer:
    """Turn link text into a path that file search understands.

    Pure string manipulation; the file system is never consulted.
    """

    def __init__(self, os: OperatingSystem | None = None) -> None:
        self.os = OperatingSystem(os) if os is not None else OperatingSystem.host()
        self._pathmod = ntpath if self.os is OperatingSystem.WINDOWS else posixpath

    @property
    def separator(self) -> str:
        return self.os.separator

    def normalize(
        self,
        text: str,
        base_directories: Sequence[BaseDirectory] = (),
    ) -> PathCandidate:
        """Normalize ``text`` against the ordered workspace folders.

        Args:
            text: Raw link text.
            base_directories: Workspace folders; the first whose name prefixes
                the path is stripped.

        Returns:
            PathCandidate whose ``raw_path`` may still carry a ``:line:col``
            suffix and whose ``source_text`` is the untouched input.
        """
        path = _FILE_SCHEME_PATTERN.sub("", text)
        path = self._pathmod.normpath(path)
        if self.os is OperatingSystem.POSIX and path.startswith("//"):
            # normpath keeps exactly two leading slashes
            path = "/" + path.lstrip("/")
        path = _RELATIVE_LEADER_PATTERN.sub("", path)
        path = _TRAILING_MARKER_PATTERN.sub("", path)
        path = self.strip_base_directory(path, base_directories)
        return PathCandidate(raw_path=path, source_text=text)

    def strip_base_directory(self, path: str, base_directories: Sequence[BaseDirectory]) -> str:
        """Remove the first workspace folder name that prefixes ``path``."""
        for folder in base_directories:
            if not folder.name:
                continue
            prefix = folder.name + self.separator
            if path[: len(prefix)] == prefix:
                return path[len(prefix) :]
        return path
