"""Status reporting for installed components."""

from dataclasses import dataclass
from pathlib import Path

from aimax.components import COMPONENTS
from aimax.paths import InstallPaths


@dataclass
class ComponentStatus:
    """Status of a single component's target directory."""

    installed: bool
    path: Path
    file_count: int = 0


def check_status(paths: InstallPaths) -> dict[str, ComponentStatus]:
    """Report which component target directories exist.

    Counts the entries directly inside each target directory. Entries from
    other plugins sharing the directory are included in the count.

    Args:
        paths: Source and target roots

    Returns:
        Mapping of component key to ComponentStatus, in registry order
    """
    report: dict[str, ComponentStatus] = {}

    for key, component in COMPONENTS.items():
        target_path = paths.component_target(component)
        if target_path.is_dir():
            report[key] = ComponentStatus(
                installed=True,
                path=target_path,
                file_count=sum(1 for _ in target_path.iterdir()),
            )
        else:
            report[key] = ComponentStatus(installed=False, path=target_path)

    return report
