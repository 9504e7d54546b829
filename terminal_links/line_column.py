"""Line and column extraction from link text."""

from __future__ import annotations

import re

from .grammar import LinkGrammar
from .grammar import get_grammar
from .models import LineColumnInfo
from .models import OperatingSystem

# Bare file names longer than this are not scanned; the fallback is quadratic
MAX_BARE_SCAN_LENGTH = 1024


def _parse_number(value: str | None) -> int | None:
    if not value:
        return None
    try:
        number = int(value, 10)
    except ValueError:
        return None
    return number if number > 0 else None


class LineColumnExtractor:
    """Recover the position suffix of a link.

    Understands ``:line``, ``:line:col``, ``(line)``, ``(line, col)``,
    ``"file", line N`` and similar notations. Positions default to line 1,
    column 1 when the text carries none.
    """

    def __init__(self, os: OperatingSystem | None = None) -> None:
        self.os = OperatingSystem(os) if os is not None else OperatingSystem.host()
        self._grammar = get_grammar(self.os)

    @property
    def grammar(self) -> LinkGrammar:
        return self._grammar

    def extract(self, text: str) -> LineColumnInfo:
        """Return the line/column info embedded in ``text``.

        Text without a path separator is only scanned for a bare file name
        when it is at most ``MAX_BARE_SCAN_LENGTH`` characters long.

        Args:
            text: Raw link text, before any path normalization.

        Returns:
            LineColumnInfo, ``(1, 1)`` when no position is present.
        """
        match = self._grammar.local_link.search(text)
        if match is None and len(text) <= MAX_BARE_SCAN_LENGTH:
            # No path-bearing match; try bare file names like ``foo.ts:10``
            for candidate in self._grammar.bare_link.finditer(text):
                if self._first_line_clause(candidate) is not None:
                    match = candidate
                    break
        if match is None:
            return LineColumnInfo()
        return self._line_column_from_match(match)

    def _first_line_clause(self, match: re.Match[str]) -> int | None:
        for index in range(self._grammar.clause_count):
            if match.group(self._grammar.line_group(index)):
                return index
        return None

    def _line_column_from_match(self, match: re.Match[str]) -> LineColumnInfo:
        index = self._first_line_clause(match)
        if index is None:
            return LineColumnInfo()
        line = _parse_number(match.group(self._grammar.line_group(index)))
        if line is None:
            return LineColumnInfo()
        column = _parse_number(match.group(self._grammar.column_group(index)))
        return LineColumnInfo(line=line, column=column or 1)


def extract_line_column(text: str, os: OperatingSystem | None = None) -> LineColumnInfo:
    """Convenience wrapper around ``LineColumnExtractor.extract``."""
    return LineColumnExtractor(os).extract(text)
