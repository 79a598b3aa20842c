"""Install command for aimax."""

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
from aimax.components import get_component
from aimax.exceptions import AimaxError
from aimax.installer import install as run_install

app = typer.Typer(help="Install components into the Claude directory.")


@app.callback(invoke_without_command=True)
def install(
    components: ComponentOption = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing files without making .backup copies.",
        ),
    ] = False,
    backup: Annotated[
        bool,
        typer.Option(
            "--backup/--no-backup",
            help="Back up existing files to <file>.backup before overwriting.",
        ),
    ] = True,
    source_dir: SourceDirOption = None,
    target_dir: TargetDirOption = None,
) -> None:
    """Install agents, rules, commands and skills.

    Existing files are always overwritten. Unless --force or --no-backup is
    given, the previous content is kept next to it as <file>.backup.

    Examples:
      aimax install
      aimax install -c agents -c skills
      aimax install --force --target-dir ./.claude
    """
    keys = resolve_components(components)
    paths = get_paths(source_dir, target_dir)

    names = ", ".join(get_component(key).name for key in keys)
    try:
        with progress_spinner(f"Installing {names}..."):
            result = run_install(keys, paths, backup=backup, force=force)
    except (AimaxError, OSError) as e:
        console.print("[red]Install failed[/red]")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console.print("[green]Install complete[/green]")
    console.print(f"  [dim]Target: {paths.claude_dir}[/dim]")
    console.print(f"  [cyan]Installed:[/cyan] {result.total_installed} file(s)")

    if result.skipped_files:
        console.print(f"  [yellow]Skipped:[/yellow] {len(result.skipped_files)} file(s)")

    if result.backup_files:
        console.print(f"  [yellow]Backed up:[/yellow] {len(result.backup_files)} existing file(s)")

    for path, message in result.backup_errors:
        console.print(
            f"  [yellow]Warning: could not back up {format_path(path, paths.claude_dir)}: {message}[/yellow]"
        )
