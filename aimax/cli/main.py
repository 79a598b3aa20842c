"""CLI entry point for aimax."""

from typing import Annotated

import typer

from aimax import __version__
from aimax.cli import install, status, uninstall
from aimax.cli.common import console

app = typer.Typer(
    name="aimax",
    help="Install agents, rules, commands and skills into ~/.claude.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"aimax {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Install agents, rules, commands and skills into ~/.claude."""


app.add_typer(install.app, name="install")
app.add_typer(uninstall.app, name="uninstall")
app.add_typer(status.app, name="status")
