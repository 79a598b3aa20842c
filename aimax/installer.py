"""Component installation.

Copies component files from the source tree into the Claude directory and
records every file written in the install manifest.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from aimax import __version__
from aimax.components import Component, get_component
from aimax.constants import BACKUP_SUFFIX, MARKDOWN_SUFFIX
from aimax.exceptions import SourceNotFoundError, TargetConflictError
from aimax.manifest import InstallManifest, save_manifest
from aimax.paths import InstallPaths


@dataclass
class InstallResult:
    """Result of an install operation.

    Attributes:
        installed_files: Target files written, in encounter order
        skipped_files: Reserved, always empty
        backup_files: Backups written before overwriting existing files
        backup_errors: List of (path, error_message) for backups that failed
    """

    installed_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    backup_files: list[Path] = field(default_factory=list)
    backup_errors: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def total_installed(self) -> int:
        return len(self.installed_files)

    def merge(self, other: "InstallResult") -> None:
        """Merge another InstallResult into this one."""
        self.installed_files.extend(other.installed_files)
        self.skipped_files.extend(other.skipped_files)
        self.backup_files.extend(other.backup_files)
        self.backup_errors.extend(other.backup_errors)


def backup_path_for(path: Path) -> Path:
    """Get the backup sibling for a target file."""
    return path.with_name(path.name + BACKUP_SUFFIX)


def _install_file(
    source: Path,
    dest: Path,
    result: InstallResult,
    *,
    backup: bool,
    force: bool,
) -> None:
    """Copy one file, backing up an existing destination first.

    The copy always happens; the backup only controls whether the previous
    content is kept alongside.

    Raises:
        TargetConflictError: If dest is an existing directory
    """
    if dest.is_dir() and not dest.is_symlink():
        raise TargetConflictError(f"Cannot install {source.name}: {dest} is a directory")

    if dest.exists() and not force and backup:
        backup_dest = backup_path_for(dest)
        try:
            shutil.copy2(dest, backup_dest)
            result.backup_files.append(backup_dest)
        except OSError as e:
            result.backup_errors.append((dest, str(e)))

    shutil.copy2(source, dest)
    result.installed_files.append(dest)


def _copy_tree(
    source: Path,
    dest: Path,
    result: InstallResult,
    *,
    backup: bool,
    force: bool,
) -> None:
    """Copy a directory tree depth-first without filtering by extension."""
    for item in sorted(source.iterdir()):
        dest_item = dest / item.name
        if item.is_dir():
            dest_item.mkdir(parents=True, exist_ok=True)
            _copy_tree(item, dest_item, result, backup=backup, force=force)
        else:
            _install_file(item, dest_item, result, backup=backup, force=force)


def _copy_markdown_files(
    source: Path,
    dest: Path,
    result: InstallResult,
    *,
    backup: bool,
    force: bool,
) -> None:
    """Copy the top-level .md files of a directory."""
    for item in sorted(source.iterdir()):
        if not item.name.endswith(MARKDOWN_SUFFIX):
            continue
        if not item.is_file():
            continue
        _install_file(item, dest / item.name, result, backup=backup, force=force)


def install_component(
    component: Component,
    paths: InstallPaths,
    *,
    backup: bool = True,
    force: bool = False,
) -> InstallResult:
    """Install a single component.

    Args:
        component: The component to install
        paths: Source and target roots
        backup: Back up existing target files before overwriting them
        force: Overwrite existing target files without backing them up

    Returns:
        InstallResult for this component

    Raises:
        SourceNotFoundError: If the component's source directory is missing
        TargetConflictError: If a target file path is an existing directory
        OSError: On any filesystem error while copying
    """
    source_path = paths.component_source(component)
    target_path = paths.component_target(component)

    if not source_path.is_dir():
        raise SourceNotFoundError(
            f"Source directory for {component.name} not found: {source_path}"
        )

    target_path.mkdir(parents=True, exist_ok=True)

    result = InstallResult()
    if component.recursive:
        _copy_tree(source_path, target_path, result, backup=backup, force=force)
    else:
        _copy_markdown_files(source_path, target_path, result, backup=backup, force=force)
    return result


def install(
    component_keys: list[str],
    paths: InstallPaths,
    *,
    backup: bool = True,
    force: bool = False,
) -> InstallResult:
    """Install the selected components and write the manifest.

    Unknown component keys are skipped. The manifest is replaced, not merged,
    and records the requested keys as given.

    Args:
        component_keys: Keys of the components to install
        paths: Source and target roots
        backup: Back up existing target files before overwriting them
        force: Overwrite existing target files without backing them up

    Returns:
        InstallResult across all components

    Raises:
        SourceNotFoundError: If a component's source directory is missing
        TargetConflictError: If a target file path is an existing directory
        OSError: On any filesystem error; files already copied stay in place
    """
    paths.claude_dir.mkdir(parents=True, exist_ok=True)

    result = InstallResult()
    for key in component_keys:
        component = get_component(key)
        if component is None:
            continue
        result.merge(install_component(component, paths, backup=backup, force=force))

    save_manifest(
        paths.manifest_path,
        InstallManifest.create(__version__, list(component_keys), result.installed_files),
    )
    return result
