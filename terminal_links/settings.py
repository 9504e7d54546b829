"""Settings for terminal link resolution.

Philosophy: two YAML files, project wins over global, explicit overrides win
over both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from pathlib import PurePosixPath
from pathlib import PureWindowsPath
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from .exceptions import SettingsError
from .local import DEFAULT_SEARCH_EXCLUDE
from .matcher import DEFAULT_MAX_RESULTS
from .models import BaseDirectory
from .models import OperatingSystem

OS_ENV_VAR = "TERMINAL_LINKS_OS"


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        return cls(
            global_settings=Path.home() / ".terminal-links" / "settings.yaml",
            project_settings=Path.cwd() / ".terminal-links.yaml",
        )


class WorkspaceFolder(BaseModel):
    """A workspace folder entry; ``name`` defaults to the last path segment."""

    root_path: str
    name: str | None = None

    def to_base_directory(self) -> BaseDirectory:
        name = self.name
        if not name:
            pure = PureWindowsPath(self.root_path) if "\\" in self.root_path else PurePosixPath(self.root_path)
            name = pure.name
        return BaseDirectory(name=name, root_path=self.root_path)


class LinkSettings(BaseModel):
    """Validated resolver configuration."""

    os: OperatingSystem = Field(default_factory=OperatingSystem.host)
    remote_authority: str | None = None
    workspace_folders: list[WorkspaceFolder] = Field(default_factory=list)
    max_search_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=2)
    search_exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_SEARCH_EXCLUDE))

    @field_validator("workspace_folders", mode="before")
    @classmethod
    def _coerce_folders(cls, value: Any) -> Any:
        # Allow plain path strings in YAML lists
        if isinstance(value, list):
            return [{"root_path": item} if isinstance(item, str) else item for item in value]
        return value

    def base_directories(self) -> list[BaseDirectory]:
        return [folder.to_base_directory() for folder in self.workspace_folders]


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(content, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return content


def load_settings(
    paths: SettingsPaths | None = None,
    overrides: dict[str, Any] | None = None,
) -> LinkSettings:
    """Load settings from the global and project files.

    Args:
        paths: Settings file locations. Defaults to ``SettingsPaths.default()``.
        overrides: Values that win over both files; None values are ignored.

    Returns:
        Validated LinkSettings.

    Raises:
        SettingsError: If a file is malformed or validation fails.
    """
    paths = paths or SettingsPaths.default()
    merged: dict[str, Any] = {}
    merged.update(_read_settings_file(paths.global_settings))
    merged.update(_read_settings_file(paths.project_settings))

    env_os = os.environ.get(OS_ENV_VAR)
    if env_os:
        merged["os"] = env_os

    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return LinkSettings.model_validate(merged)
    except ValidationError as e:
        raise SettingsError(f"Invalid terminal link settings: {e}") from e
