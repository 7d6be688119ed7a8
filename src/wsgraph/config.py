"""
Global Configuration and Workspace Defaults.

This module centralizes the constants shared by the lockfile parser, the
link resolver and the architecture validator, plus the optional
``wsgraph.yaml`` file that lets a workspace override its layout prefixes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

# --- Lockfile ---
LOCKFILE_NAME = "pnpm-lock.yaml"

# Only pnpm-lock.yaml v9.x is understood
SUPPORTED_LOCKFILE_MAJOR = 9

# Version prefix marking a workspace-internal dependency
LINK_PREFIX = "link:"

# Synthetic importer for the workspace root, never a graph node
ROOT_IMPORTER = "."

# --- Output ---
REPORT_FORMAT = "wsgraph.deps.v1"

# --- Workspace layout ---
CONFIG_FILE_NAME = "wsgraph.yaml"

DEFAULT_APP_PREFIXES: List[str] = ["apps/"]
DEFAULT_LIB_PREFIXES: List[str] = ["libs/"]
DEFAULT_PACKAGE_PREFIXES: List[str] = ["packages/"]


def _as_prefixes(key: str, value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        raise ValueError(f"Invalid prefixes for '{key}': {value!r}")
    # Prefixes always end on a segment boundary so "apps" never matches "apps-legacy/x"
    return [p if p.endswith("/") else f"{p}/" for p in value]


@dataclass
class WorkspaceConfig:
    """
    Layout conventions used to classify workspace packages.

    Attributes:
        app_prefixes: Path prefixes marking applications.
        lib_prefixes: Path prefixes marking libraries.
        package_prefixes: Path prefixes marking generic shared packages.
    """

    app_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_APP_PREFIXES))
    lib_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_LIB_PREFIXES))
    package_prefixes: List[str] = field(
        default_factory=lambda: list(DEFAULT_PACKAGE_PREFIXES)
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkspaceConfig":
        """Parse from the ``architecture`` section of wsgraph.yaml."""
        section = data.get("architecture") or {}
        if not isinstance(section, dict):
            raise ValueError("'architecture' must be a mapping")

        return cls(
            app_prefixes=_as_prefixes("apps", section.get("apps"), DEFAULT_APP_PREFIXES),
            lib_prefixes=_as_prefixes("libs", section.get("libs"), DEFAULT_LIB_PREFIXES),
            package_prefixes=_as_prefixes(
                "packages", section.get("packages"), DEFAULT_PACKAGE_PREFIXES
            ),
        )

    @classmethod
    def load(cls, path: Path) -> "WorkspaceConfig":
        """
        Load a wsgraph.yaml file.

        Args:
            path: Path to the config file.

        Returns:
            WorkspaceConfig: Parsed configuration. Returns defaults if the
            file does not exist or is empty.

        Raises:
            ValueError: If the YAML file is malformed.
        """
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Failed to parse {path}: expected a mapping")

        try:
            return cls.from_dict(data)
        except ValueError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e

    @classmethod
    def for_root(cls, root: Path) -> "WorkspaceConfig":
        """Load the config file that lives in a workspace root, if any."""
        return cls.load(root / CONFIG_FILE_NAME)
