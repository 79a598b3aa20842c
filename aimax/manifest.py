"""Install manifest persistence.

The manifest records the most recent install: the aimax version, the
requested component keys and every file written. Uninstall uses it to delete
exactly those files and nothing else.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def _utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _string_list(value: Any, key: str) -> list[str]:
    """Validate an optional list-of-strings field. A missing field is empty."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{key} must be a list of strings")
    return list(value)


@dataclass
class InstallManifest:
    """Record of the most recent install.

    Example:
        {
          "version": "0.1.0",
          "components": ["agents", "skills"],
          "installedFiles": ["/home/me/.claude/agents/reviewer.md"],
          "installedAt": "2024-01-01T00:00:00.000Z"
        }
    """

    version: str
    components: list[str] = field(default_factory=list)
    installed_files: list[str] = field(default_factory=list)
    installed_at: str = ""

    @classmethod
    def create(
        cls,
        version: str,
        components: list[str],
        installed_files: list[Path],
    ) -> "InstallManifest":
        """Create a manifest stamped with the current time."""
        return cls(
            version=version,
            components=list(components),
            installed_files=[str(path) for path in installed_files],
            installed_at=_utc_timestamp(),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InstallManifest":
        """Create a manifest from its JSON document.

        Manifests written before file tracking have no ``installedFiles``.

        Raises:
            ValueError: If a list field is not a list of strings, or a
                recorded file path is not absolute
        """
        components = _string_list(data.get("components"), "components")
        installed_files = _string_list(data.get("installedFiles"), "installedFiles")
        for path in installed_files:
            if not Path(path).is_absolute():
                raise ValueError(f"installedFiles entry is not absolute: {path!r}")

        return cls(
            version=str(data.get("version", "")),
            components=components,
            installed_files=installed_files,
            installed_at=str(data.get("installedAt", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "version": self.version,
            "components": list(self.components),
            "installedFiles": list(self.installed_files),
            "installedAt": self.installed_at,
        }

    @property
    def has_file_list(self) -> bool:
        """Whether this manifest records any installed files."""
        return bool(self.installed_files)


def load_manifest(path: Path) -> InstallManifest | None:
    """Load the manifest.

    A missing, unreadable or corrupt manifest is reported as no manifest.

    Args:
        path: Manifest file path

    Returns:
        The InstallManifest, or None
    """
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None

    if not isinstance(data, dict):
        return None

    try:
        return InstallManifest.from_dict(data)
    except ValueError:
        return None


def save_manifest(path: Path, manifest: InstallManifest) -> None:
    """Write the manifest, replacing any previous one."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(manifest.to_dict(), indent=2) + "\n", encoding="utf-8")


def remove_manifest(path: Path) -> bool:
    """Delete the manifest.

    Returns:
        True if a manifest was removed, False if none existed
    """
    if not path.exists():
        return False
    path.unlink()
    return True
