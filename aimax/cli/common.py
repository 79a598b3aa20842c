"""Shared CLI utilities for aimax commands."""

from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner

from aimax.components import component_keys, require_component
from aimax.exceptions import UnknownComponentError
from aimax.paths import InstallPaths

console = Console()

ComponentOption = Annotated[
    Optional[List[str]],
    typer.Option(
        "--component",
        "-c",
        help="Component to act on (agents, rules, commands, skills). Repeatable; defaults to all.",
    ),
]

SourceDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--source-dir",
        help="Directory holding the component sources (default: bundled resources or $AIMAX_SOURCE_DIR)",
    ),
]

TargetDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--target-dir",
        help="Claude configuration directory (default: ~/.claude or $AIMAX_CLAUDE_DIR)",
    ),
]


def resolve_components(selected: list[str] | None) -> list[str]:
    """Validate user-selected component keys.

    Args:
        selected: Keys given on the command line, or None for all

    Returns:
        Keys in the order given, without duplicates

    Raises:
        typer.BadParameter: If a key is not a known component
    """
    if not selected:
        return component_keys()

    keys: list[str] = []
    for key in selected:
        try:
            require_component(key)
        except UnknownComponentError as e:
            raise typer.BadParameter(str(e), param_hint="'--component'")
        if key not in keys:
            keys.append(key)
    return keys


def get_paths(source_dir: Path | None, target_dir: Path | None) -> InstallPaths:
    """Resolve install paths from options and environment."""
    return InstallPaths.from_environment(source_dir=source_dir, claude_dir=target_dir)


@contextmanager
def progress_spinner(text: str):
    """Show spinner during a long-running operation."""
    with Live(Spinner("dots", text=text), console=console, transient=True):
        yield


def format_path(path: Path, base: Path) -> str:
    """Show a path relative to base when it lives below it."""
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)
