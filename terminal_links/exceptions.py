"""Exception hierarchy for terminal-links."""

from __future__ import annotations


class TerminalLinkError(Exception):
    """Base exception for all terminal link errors."""


class UnresolvedLinkError(TerminalLinkError):
    """An opener was handed a link that carries no resolved resource.

    This is a programming error on the caller's side: link detection is
    expected to attach a resource before dispatching to the file and folder
    openers.

    Attributes:
        text: The link text that was being opened.
        kind: Which opener rejected the link ("file" or "folder").
    """

    def __init__(self, text: str, kind: str) -> None:
        if kind == "folder":
            message = "Tried to open folder in workspace link without a resolved URI"
        else:
            message = "Tried to open file link without a resolved URI"
        super().__init__(message)
        self.text = text
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, text={self.text!r}, kind={self.kind!r})"


class SettingsError(TerminalLinkError):
    """A settings file could not be parsed or failed validation."""
