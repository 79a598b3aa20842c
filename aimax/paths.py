"""Source and target directory resolution."""

import os
from dataclasses import dataclass
from pathlib import Path

from aimax.components import Component
from aimax.constants import (
    CLAUDE_DIR_ENV,
    MANIFEST_FILENAME,
    SOURCE_DIR_ENV,
    TOOL_DIR_NAME,
)

# Component content shipped inside the package
BUNDLED_SOURCE_DIR = Path(__file__).resolve().parent / "resources"


def get_source_dir() -> Path:
    """Get the source tree root, honoring AIMAX_SOURCE_DIR."""
    override = os.environ.get(SOURCE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return BUNDLED_SOURCE_DIR


def get_claude_dir() -> Path:
    """Get the Claude configuration directory, honoring AIMAX_CLAUDE_DIR."""
    override = os.environ.get(CLAUDE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / TOOL_DIR_NAME


@dataclass(frozen=True)
class InstallPaths:
    """The two roots every install, uninstall and status call works against."""

    source_dir: Path
    claude_dir: Path

    @classmethod
    def from_environment(
        cls,
        source_dir: Path | None = None,
        claude_dir: Path | None = None,
    ) -> "InstallPaths":
        """Resolve roots from the environment.

        Args:
            source_dir: Explicit source root, overrides the environment
            claude_dir: Explicit target root, overrides the environment

        Returns:
            InstallPaths with absolute roots
        """
        return cls(
            source_dir=Path(source_dir).expanduser().resolve() if source_dir else get_source_dir(),
            claude_dir=Path(claude_dir).expanduser().resolve() if claude_dir else get_claude_dir(),
        )

    @property
    def manifest_path(self) -> Path:
        """Path to the install manifest."""
        return self.claude_dir / MANIFEST_FILENAME

    def component_source(self, component: Component) -> Path:
        """Get the source directory for a component."""
        return self.source_dir / component.source

    def component_target(self, component: Component) -> Path:
        """Get the target directory for a component."""
        return self.claude_dir / component.target
