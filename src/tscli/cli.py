"""
tscli.cli - Command Line Interface
==================================

This module provides the ``tsci`` command-line interface using Typer.

Architecture
------------
    app (main entry point)
    └── init   - Scaffold a tscircuit project

The command handlers only translate arguments into ``InitOptions``,
call into the generator and decide the exit status. All file system
work lives in ``generator.py``.

Usage Examples
--------------
    $ tsci init
    $ tsci init my-board
    $ tsci init my-board --no-install

Show help:
    $ tsci --help
    $ tsci init --help

See Also
--------
- generator.py: Project initialization logic
- models.py: Option models
"""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel

from tscli import __version__
from tscli.config import get_settings
from tscli.generator import init_project
from tscli.models import InitOptions
from tscli.package_manager import DependencyInstallError


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="tsci",
    help="Command line tools for tscircuit projects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """
    Display version information and exit.

    Parameters
    ----------
    value : bool
        True if --version was passed.
    """
    if value:
        console.print(Panel(
            f"[bold green]tsci[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Command line tools for tscircuit[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]tsci[/] - command line tools for tscircuit.

    [bold]Quick Start:[/]

        tsci init my-board
    """


# =============================================================================
# Init Command
# =============================================================================

@app.command()
def init(
    directory: Annotated[
        str | None,
        typer.Argument(
            help="Directory name (optional, defaults to current directory)",
            show_default=False,
        ),
    ] = None,
    no_install: Annotated[
        bool,
        typer.Option(
            "--no-install",
            help="Skip installing starter dependencies",
        ),
    ] = False,
    skip_version_check: Annotated[
        bool,
        typer.Option(
            "--skip-version-check",
            help="Don't check the registry for a newer tsci release",
        ),
    ] = False,
) -> None:
    """
    Initialize a new tscircuit project.

    Scaffolds the project in [cyan]DIRECTORY[/] (created if needed) or in
    the current directory. Files that already exist are never overwritten,
    so it is safe to run init again.

    [bold]Examples:[/]

        tsci init
        tsci init my-board
        tsci init my-board --no-install
    """
    try:
        options = InitOptions(
            directory=directory,
            install=not no_install,
            check_version=not skip_version_check,
        )
        settings = get_settings()
    except ValidationError as e:
        for error in e.errors():
            rprint(f"[red]Error:[/] {error['msg']}")
        raise typer.Exit(1)

    try:
        result = init_project(options, settings)
    except DependencyInstallError as e:
        rprint(f"[red]Error:[/] {e}")
        rprint("[dim]Files already written were kept; run 'tsci init' again to retry.[/]")
        raise typer.Exit(1)
    except OSError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    raise typer.Exit(result.exit_code)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
