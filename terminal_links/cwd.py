"""Rewriting of relative links against the shell's working directory."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class CwdRelativeRewriter:
    """Splice a relative link onto the cwd reported for its terminal line.

    Segments are compared by position: the innermost cwd segment against the
    first link segment, the next one out against the second, and so on. Each
    positional match drops one leading link segment. The result is only a
    hint; callers must still verify that it exists.
    """

    def __init__(self, separator: str = "/") -> None:
        self.separator = separator

    def rewrite(
        self,
        candidate: str,
        cwd: str | None,
        separator: str | None = None,
    ) -> str | None:
        """Return ``candidate`` rewritten against ``cwd``.

        Args:
            candidate: Normalized link path.
            cwd: Directory the shell was in when the line was printed.
            separator: Overrides the separator given at construction.

        Returns:
            The rewritten path, or None when no cwd is known.
        """
        if not cwd:
            return None
        sep = separator or self.separator
        if sep not in candidate:
            return cwd + sep + candidate

        cwd_segments = cwd.split(sep)[::-1]
        link_segments = candidate.split(sep)
        common = 0
        for i in range(len(cwd_segments)):
            if i < len(link_segments) and cwd_segments[i] == link_segments[i]:
                common += 1
        rewritten = cwd + sep + sep.join(link_segments[common:])
        logger.debug(f"Rewrote {candidate!r} against cwd {cwd!r} -> {rewritten!r}")
        return rewritten
