"""Component uninstallation.

Target directories such as ``~/.claude/agents`` are shared with other plugins,
so uninstall only deletes what aimax can show is its own:

- Manifest mode: the files recorded by the last install.
- Legacy mode: for installs that predate file tracking, the files whose
  relative paths the current source tree still defines.

Deletion is best-effort. A failure on one path is recorded and the remaining
paths are still processed.
"""

import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from aimax.components import Component, get_component
from aimax.constants import MARKDOWN_SUFFIX
from aimax.manifest import InstallManifest, load_manifest, remove_manifest
from aimax.paths import InstallPaths


class UninstallMode(Enum):
    """How uninstall decides which files belong to aimax."""

    MANIFEST = "manifest"
    LEGACY = "legacy"


@dataclass
class UninstallResult:
    """Result of an uninstall operation.

    Attributes:
        mode: Strategy used for this uninstall
        removed_files: Paths that were deleted
        failed_files: List of (path, error_message) for deletions that failed
        removed_dirs: Empty directories pruned afterwards
        manifest_removed: Whether a manifest file was deleted
    """

    mode: UninstallMode
    removed_files: list[Path] = field(default_factory=list)
    failed_files: list[tuple[Path, str]] = field(default_factory=list)
    removed_dirs: list[Path] = field(default_factory=list)
    manifest_removed: bool = False

    @property
    def has_errors(self) -> bool:
        return len(self.failed_files) > 0


def resolve_mode(manifest: InstallManifest | None) -> UninstallMode:
    """Pick the uninstall strategy for a loaded manifest."""
    if manifest is not None and manifest.has_file_list:
        return UninstallMode.MANIFEST
    return UninstallMode.LEGACY


def list_source_files(source_dir: Path, recursive: bool = False) -> list[Path]:
    """List the files an install of a component would write.

    Uses the same selection as install: every file of the subtree when
    recursive, otherwise the top-level regular files ending in ``.md``.

    Args:
        source_dir: Component source directory
        recursive: Whether to descend into subdirectories

    Returns:
        Paths relative to source_dir
    """
    files: list[Path] = []

    def traverse(current: Path, relative: Path | None) -> None:
        for item in sorted(current.iterdir()):
            item_relative = relative / item.name if relative else Path(item.name)
            if recursive:
                if item.is_dir():
                    traverse(item, item_relative)
                else:
                    files.append(item_relative)
            elif item.name.endswith(MARKDOWN_SUFFIX) and item.is_file():
                files.append(item_relative)

    traverse(source_dir, None)
    return files


def prune_empty_dirs(
    root: Path,
    errors: list[tuple[Path, str]] | None = None,
) -> list[Path]:
    """Remove empty directories below root, bottom-up.

    A directory is removed when, after its own subdirectories have been
    pruned, it has no entries left. ``root`` itself is never removed. A
    directory that can't be read or removed is skipped and its siblings are
    still pruned.

    Args:
        root: Directory to prune below
        errors: Optional list collecting (path, error_message) for failures

    Returns:
        Directories that were removed
    """
    removed: list[Path] = []
    if not root.is_dir():
        return removed

    try:
        children = sorted(root.iterdir())
    except OSError as e:
        if errors is not None:
            errors.append((root, str(e)))
        return removed

    for item in children:
        if item.is_symlink() or not item.is_dir():
            continue
        removed.extend(prune_empty_dirs(item, errors))
        try:
            if not any(item.iterdir()):
                item.rmdir()
                removed.append(item)
        except OSError as e:
            if errors is not None:
                errors.append((item, str(e)))

    return removed


def _remove_file(path: Path, result: UninstallResult) -> None:
    """Delete a single file, recording the outcome.

    A path that no longer exists is not an error. Directories are never
    deleted here, whatever name they have.
    """
    if path.is_dir() and not path.is_symlink():
        return

    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as e:
        result.failed_files.append((path, str(e)))
        return

    result.removed_files.append(path)


def _remove_tree(path: Path, result: UninstallResult) -> None:
    """Delete a directory owned by aimax, recording the outcome."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as e:
        result.failed_files.append((path, str(e)))
        return

    result.removed_files.append(path)


def _prune_component(
    component: Component,
    paths: InstallPaths,
    result: UninstallResult,
) -> None:
    """Prune empty directories left under a component's target."""
    target_path = paths.component_target(component)
    if not target_path.is_dir():
        return

    result.removed_dirs.extend(prune_empty_dirs(target_path, result.failed_files))

    # An exclusive target is ours, so an empty one goes too
    if not component.exclusive:
        return
    try:
        if not any(target_path.iterdir()):
            target_path.rmdir()
            result.removed_dirs.append(target_path)
    except OSError as e:
        result.failed_files.append((target_path, str(e)))


def _uninstall_recorded(
    manifest: InstallManifest,
    components: list[Component],
    paths: InstallPaths,
    result: UninstallResult,
) -> None:
    """Delete exactly the files listed in the manifest."""
    for recorded in manifest.installed_files:
        _remove_file(Path(recorded), result)

    for component in components:
        _prune_component(component, paths, result)


def _uninstall_reconstructed(
    components: list[Component],
    paths: InstallPaths,
    result: UninstallResult,
) -> None:
    """Delete component files without a manifest.

    Exclusive targets are removed wholesale. Shared targets only lose the
    files whose relative paths the current source tree defines; files removed
    from the source since the install are left behind.
    """
    for component in components:
        target_path = paths.component_target(component)
        if not target_path.exists():
            continue

        if component.exclusive:
            _remove_tree(target_path, result)
            continue

        source_path = paths.component_source(component)
        if not source_path.is_dir():
            continue

        for relative in list_source_files(source_path, component.recursive):
            target_file = target_path / relative
            _remove_file(target_file, result)

        _prune_component(component, paths, result)


def uninstall(component_keys: list[str], paths: InstallPaths) -> UninstallResult:
    """Uninstall the selected components and remove the manifest.

    In manifest mode the recorded files are deleted regardless of the
    selected keys, which only scope the empty-directory pruning. Unknown keys
    are ignored.

    Args:
        component_keys: Keys of the components to uninstall
        paths: Source and target roots

    Returns:
        UninstallResult with removed and failed paths
    """
    manifest = load_manifest(paths.manifest_path)
    mode = resolve_mode(manifest)
    result = UninstallResult(mode=mode)

    components = [
        component
        for component in (get_component(key) for key in component_keys)
        if component is not None
    ]

    if mode is UninstallMode.MANIFEST:
        _uninstall_recorded(manifest, components, paths, result)
    else:
        _uninstall_reconstructed(components, paths, result)

    result.manifest_removed = remove_manifest(paths.manifest_path)
    return result
