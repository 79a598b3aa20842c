"""Status command for aimax."""

import typer
from rich.table import Table

from aimax.cli.common import SourceDirOption, TargetDirOption, console, get_paths
from aimax.components import COMPONENTS
from aimax.manifest import load_manifest
from aimax.status import check_status

app = typer.Typer(help="Show which components are installed.")


@app.callback(invoke_without_command=True)
def status(
    source_dir: SourceDirOption = None,
    target_dir: TargetDirOption = None,
) -> None:
    """Show installation status of each component.

    Examples:
      aimax status
      aimax status --target-dir ./.claude
    """
    paths = get_paths(source_dir, target_dir)
    report = check_status(paths)

    table = Table(title=f"Components in {paths.claude_dir}")
    table.add_column("Component", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Entries", justify="right")
    table.add_column("Path", style="dim", overflow="fold")

    for key, item in report.items():
        state = "[green]installed[/green]" if item.installed else "[dim]not installed[/dim]"
        table.add_row(COMPONENTS[key].name, state, str(item.file_count), str(item.path))

    console.print(table)

    manifest = load_manifest(paths.manifest_path)
    if manifest is None:
        console.print("[dim]No install record found[/dim]")
        return

    console.print(f"[cyan]Installed version:[/cyan] {manifest.version or 'unknown'}")
    if manifest.installed_at:
        console.print(f"[dim]Installed at: {manifest.installed_at}[/dim]")
    if manifest.has_file_list:
        console.print(f"[dim]Tracked files: {len(manifest.installed_files)}[/dim]")
