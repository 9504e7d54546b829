"""Tests for value types and exceptions."""

import pytest

from terminal_links.exceptions import TerminalLinkError
from terminal_links.exceptions import UnresolvedLinkError
from terminal_links.models import LineColumnInfo
from terminal_links.models import LinkFragment
from terminal_links.models import OperatingSystem
from terminal_links.models import Resource
from terminal_links.models import TerminalLink


class TestModels:
    """Tests for the value types."""

    def test_line_column_defaults(self) -> None:
        """Positions default to 1:1."""
        assert LineColumnInfo() == LineColumnInfo(line=1, column=1)

    def test_values_are_immutable(self) -> None:
        """Value types are frozen."""
        info = LineColumnInfo(3, 4)
        with pytest.raises(AttributeError):
            info.line = 5  # type: ignore[misc]

    def test_resource_str(self) -> None:
        """Resources render as URIs."""
        assert str(Resource.file("/home/u/a.ts")) == "file:///home/u/a.ts"
        assert str(Resource("vscode-remote", "/a.ts", "wsl+Ubuntu")) == "vscode-remote://wsl+Ubuntu/a.ts"

    def test_separators(self) -> None:
        """Each OS knows its separator."""
        assert OperatingSystem.POSIX.separator == "/"
        assert OperatingSystem.WINDOWS.separator == "\\"

    def test_terminal_link_fragment(self) -> None:
        """A link exposes its resource-free fragment."""
        link = TerminalLink(text="a.ts:1", resource=Resource.file("/a.ts"), row=4)
        assert link.fragment == LinkFragment(text="a.ts:1", row=4)


def test_unresolved_link_error() -> None:
    """UnresolvedLinkError belongs to the package hierarchy and keeps context."""
    error = UnresolvedLinkError("src/a.ts", "folder")
    assert isinstance(error, TerminalLinkError)
    assert error.text == "src/a.ts"
    assert "folder in workspace" in str(error)
    assert "kind='folder'" in repr(error)
