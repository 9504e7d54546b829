"""Regular expression grammars for local links and line/column suffixes.

Each operating system gets one immutable ``LinkGrammar``. A grammar is the
concatenation of a base local-link clause and a capturing alternation of
line/column suffix clauses. Every suffix clause has exactly
``LINE_COLUMN_CLAUSE_GROUP_COUNT`` capture groups, with the line number at
the fourth group of the clause and the column two groups later. Changing
any clause changes the group offsets below, so update them together.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import OperatingSystem

_PATH_PREFIX = r"(\.\.?|\~)"
_PATH_SEPARATOR_CLAUSE = r"\/"
# '":; are allowed in paths but they are often separators so ignore them.
# \\ is excluded to avoid catastrophic backtracking.
_EXCLUDED_PATH_CHARACTERS_CLAUSE = r"[^\0\s!`&*()\[\]'\":;\\]"

# Matches /foo, ~/foo, ./foo, ../foo, foo/bar
UNIX_LOCAL_LINK_CLAUSE = (
    r"(("
    + _PATH_PREFIX
    + r"|("
    + _EXCLUDED_PATH_CHARACTERS_CLAUSE
    + r")+)?("
    + _PATH_SEPARATOR_CLAUSE
    + r"("
    + _EXCLUDED_PATH_CHARACTERS_CLAUSE
    + r")+)+)"
)

WIN_DRIVE_PREFIX = r"(?:\\\\\?\\)?[a-zA-Z]:"
_WIN_PATH_PREFIX = r"(" + WIN_DRIVE_PREFIX + r"|\.\.?|\~)"
_WIN_PATH_SEPARATOR_CLAUSE = r"(\\|\/)"
_WIN_EXCLUDED_PATH_CHARACTERS_CLAUSE = r"[^\0<>\?\|\/\s!`&*()\[\]'\":;]"

# Matches \\?\c:\foo, c:\foo, ~\foo, .\foo, ..\foo, foo\bar
WIN_LOCAL_LINK_CLAUSE = (
    r"(("
    + _WIN_PATH_PREFIX
    + r"|("
    + _WIN_EXCLUDED_PATH_CHARACTERS_CLAUSE
    + r")+)?("
    + _WIN_PATH_SEPARATOR_CLAUSE
    + r"("
    + _WIN_EXCLUDED_PATH_CHARACTERS_CLAUSE
    + r")+)+)"
)

# Same shapes with the separator segment made optional, for bare file names
# such as ``foo.ts:10``. Group counts are unchanged.
UNIX_BARE_LINK_CLAUSE = UNIX_LOCAL_LINK_CLAUSE[:-2] + "*)"
WIN_BARE_LINK_CLAUSE = WIN_LOCAL_LINK_CLAUSE[:-2] + "*)"

# Ordered most specific first; the first clause with a line capture wins.
# Positions are ASCII digits only, so [0-9] rather than \d.
LINE_AND_COLUMN_CLAUSES: tuple[str, ...] = tuple(
    clause.replace(" ", "[\u00a0 ]")
    for clause in (
        # "(file path)", line 45
        r"((\S*)['\"], line (([0-9]+)( column ([0-9]+))?))",
        # "(file path)",45
        r"((\S*)['\"],(([0-9]+)(:([0-9]+))?))",
        # (file path) on line 8, column 13
        r"((\S*) on line (([0-9]+)(, column ([0-9]+))?))",
        # (file path):line 8, column 13
        r"((\S*):line (([0-9]+)(, column ([0-9]+))?))",
        # (file path)(45), (file path) (45), (file path)(45,18), (file path) (45, 18), also with []
        r"(([^\s\(\)]*)(\s?[\(\[]([0-9]+)(,\s?([0-9]+))?)[\)\]])",
        # (file path):336, (file path):336:9
        r"(([^:\s\(\)<>'\"\[\]]*)(:([0-9]+))?(:([0-9]+))?)",
    )
)

LINE_AND_COLUMN_CLAUSE_GROUP_COUNT = 6

# Group index of the first clause's line number within the full pattern:
# local link clause groups + 1 wrapping group + 4 (line is the fourth clause group).
UNIX_LINE_AND_COLUMN_MATCH_INDEX = 11
WIN_LINE_AND_COLUMN_MATCH_INDEX = 12


@dataclass(frozen=True)
class LinkGrammar:
    """Compiled link grammar for one operating system."""

    os: OperatingSystem
    local_link: re.Pattern[str]
    bare_link: re.Pattern[str]
    line_and_column_match_index: int
    clause_count: int = len(LINE_AND_COLUMN_CLAUSES)
    clause_group_count: int = LINE_AND_COLUMN_CLAUSE_GROUP_COUNT

    def line_group(self, clause_index: int) -> int:
        """Group number holding the line capture of the given clause."""
        return self.line_and_column_match_index + self.clause_group_count * clause_index

    def column_group(self, clause_index: int) -> int:
        """Group number holding the column capture of the given clause."""
        return self.line_group(clause_index) + 2


def _compile(base_clause: str) -> re.Pattern[str]:
    return re.compile(base_clause + "(" + "|".join(LINE_AND_COLUMN_CLAUSES) + ")")


_GRAMMARS: dict[OperatingSystem, LinkGrammar] = {
    OperatingSystem.POSIX: LinkGrammar(
        os=OperatingSystem.POSIX,
        local_link=_compile(UNIX_LOCAL_LINK_CLAUSE),
        bare_link=_compile(UNIX_BARE_LINK_CLAUSE),
        line_and_column_match_index=UNIX_LINE_AND_COLUMN_MATCH_INDEX,
    ),
    OperatingSystem.WINDOWS: LinkGrammar(
        os=OperatingSystem.WINDOWS,
        local_link=_compile(WIN_LOCAL_LINK_CLAUSE),
        bare_link=_compile(WIN_BARE_LINK_CLAUSE),
        line_and_column_match_index=WIN_LINE_AND_COLUMN_MATCH_INDEX,
    ),
}


def get_grammar(os: OperatingSystem) -> LinkGrammar:
    """Return the process-wide grammar for an operating system."""
    return _GRAMMARS[OperatingSystem(os)]
