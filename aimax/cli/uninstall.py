"""Uninstall command for aimax."""

from typing import Annotated

import typer

from aimax.cli.common import (
    ComponentOption,
    SourceDirOption,
    TargetDirOption,
    console,
    format_path,
    get_paths,
    progress_spinner,
    resolve_components,
)
from aimax.uninstaller import UninstallMode
from aimax.uninstaller import uninstall as run_uninstall

app = typer.Typer(help="Remove installed components from the Claude directory.")


@app.callback(invoke_without_command=True)
def uninstall(
    components: ComponentOption = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Don't ask for confirmation.",
        ),
    ] = False,
    source_dir: SourceDirOption = None,
    target_dir: TargetDirOption = None,
) -> None:
    """Remove files installed by aimax.

    Only files recorded by the last install are removed. Files of other
    plugins sharing the same directories are left alone.

    Examples:
      aimax uninstall
      aimax uninstall -c skills --yes
    """
    keys = resolve_components(components)
    paths = get_paths(source_dir, target_dir)

    if not yes and not typer.confirm(f"Remove aimax components from {paths.claude_dir}?"):
        console.print("[dim]Aborted[/dim]")
        raise typer.Exit(0)

    try:
        with progress_spinner("Removing files..."):
            result = run_uninstall(keys, paths)
    except OSError as e:
        console.print("[red]Uninstall failed[/red]")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console.print("[green]Uninstall complete[/green]")
    if result.mode is UninstallMode.LEGACY:
        console.print("  [dim]No file list recorded, matched files against the source tree[/dim]")
    console.print(f"  [cyan]Removed:[/cyan] {len(result.removed_files)} file(s)")

    if result.has_errors:
        console.print(f"  [yellow]Failed:[/yellow] {len(result.failed_files)} file(s)")
        for path, message in result.failed_files:
            console.print(f"    [dim]{format_path(path, paths.claude_dir)}: {message}[/dim]")
        raise typer.Exit(1)
