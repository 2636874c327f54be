"""
tscli.package_manager - Package Manager Detection and Installs
==============================================================

tscircuit projects are plain JavaScript packages, so tscli defers to
whatever package manager the user already runs. Detection order:

    1. ``npm_config_user_agent`` (set by ``npx``, ``yarn dlx``,
       ``pnpm dlx`` and ``bunx`` when they launch us)
    2. A lockfile in the project directory
    3. npm
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

from rich.console import Console

from tscli.models import PackageManager


console = Console()

# Checked in this order; npm is the fallback and needs no marker
_DETECTION_ORDER = (PackageManager.YARN, PackageManager.PNPM, PackageManager.BUN)


class DependencyInstallError(RuntimeError):
    """Raised when the package manager could not install dependencies."""

    def __init__(self, message: str, command: list[str]) -> None:
        self.command = command
        super().__init__(message)


def detect_package_manager(
    directory: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PackageManager:
    """
    Work out which package manager the user is using.

    Parameters
    ----------
    directory : Path | None
        Where to look for lockfiles. Defaults to the current directory.

    environ : Mapping[str, str] | None
        Environment to read the user agent from. Defaults to ``os.environ``.

    Returns
    -------
    PackageManager
        The detected package manager, ``npm`` when nothing matches.
    """
    environ = os.environ if environ is None else environ
    directory = Path.cwd() if directory is None else directory

    user_agent = environ.get("npm_config_user_agent", "")
    for manager in _DETECTION_ORDER:
        if user_agent.startswith(manager.value):
            return manager

    for manager in _DETECTION_ORDER:
        if any((directory / lockfile).exists() for lockfile in manager.lockfiles):
            return manager

    return PackageManager.NPM


def install_dependencies(
    project_dir: Path,
    dependencies: list[str],
    package_manager: PackageManager,
) -> list[str]:
    """
    Install ``dependencies`` as dev dependencies of the project.

    The package manager's own output is streamed straight to the terminal.

    Parameters
    ----------
    project_dir : Path
        Project root containing package.json.

    dependencies : list[str]
        Packages to install.

    package_manager : PackageManager
        Which tool to run.

    Returns
    -------
    list[str]
        The command that was run.

    Raises
    ------
    DependencyInstallError
        If the executable is missing or exits with a non-zero status.
    """
    command = package_manager.dev_install_args(dependencies)
    if not dependencies:
        return command

    console.print(f"[bold]📦 Installing dependencies with {package_manager.value}...[/]")

    try:
        subprocess.run(command, cwd=project_dir, check=True)
    except FileNotFoundError as e:
        raise DependencyInstallError(
            f"'{package_manager.value}' was not found. Install it or re-run with --no-install.",
            command,
        ) from e
    except subprocess.CalledProcessError as e:
        raise DependencyInstallError(
            f"'{' '.join(command)}' exited with status {e.returncode}",
            command,
        ) from e

    console.print("  [green]✓[/] Dependencies installed")
    return command
