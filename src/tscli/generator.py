"""
tscli.generator - Project Initialization
========================================

This module contains the logic behind ``tsci init``. It checks for a
newer CLI release, prepares the target directory and writes the starter
files of a tscircuit project.

Architecture
------------
Initialization is a straight pipeline with no loops and no retries:

    1. Check version      (advisory, failures only warn)
    2. Prepare directory  (created with all missing parents)
    3. Emit scaffold      (index.tsx, .npmrc)
    4. Delegate           (package.json, tsconfig.json, .gitignore,
                           dependency install)

Every file is written only when nothing exists at its path yet, so
running ``tsci init`` again is always safe: user edits are never
touched, and files removed since the last run are filled back in. There
is no rollback; if a step fails, re-running picks up where it stopped.

``init_project`` returns an ``InitResult`` instead of exiting; the CLI
decides the process exit status.

Usage Example
-------------
>>> from tscli.generator import init_project
>>> from tscli.models import InitOptions
>>> result = init_project(InitOptions(directory="my-board", install=False))
>>> sorted(p.name for p in result.files_created)
['.gitignore', '.npmrc', 'index.tsx', 'package.json', 'tsconfig.json']
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console
from rich.panel import Panel

from tscli.config import CliSettings, get_settings
from tscli.models import InitOptions, PackageManager, npm_package_name
from tscli.package_manager import detect_package_manager, install_dependencies
from tscli.version_check import (
    RegistryVersionSource,
    VersionLookup,
    VersionSource,
    check_for_updates,
)


# =============================================================================
# Module-Level Configuration
# =============================================================================

console = Console()

# Starter files owned by init itself: template_name -> output path
SCAFFOLD_TEMPLATES: dict[str, str] = {
    "index.tsx.j2": "index.tsx",
    "npmrc.j2": ".npmrc",
}


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class InitResult:
    """
    Completion signal of an init run.

    Attributes
    ----------
    project_dir : Path
        Absolute path of the initialized project.

    files_created : list[Path]
        Files written during this run.

    files_skipped : list[Path]
        Files left alone because they already existed.

    version_lookup : VersionLookup | None
        Outcome of the version check, ``None`` when it was skipped.

    package_manager : PackageManager | None
        Package manager used for the install, ``None`` when skipped.

    install_command : list[str] | None
        The install command that was run.

    next_steps : list[str]
        Commands suggested to the user.

    exit_code : int
        Status the CLI should exit with.
    """

    project_dir: Path
    files_created: list[Path] = field(default_factory=list)
    files_skipped: list[Path] = field(default_factory=list)
    version_lookup: VersionLookup | None = None
    package_manager: PackageManager | None = None
    install_command: list[str] | None = None
    next_steps: list[str] = field(default_factory=list)
    exit_code: int = 0

    def record(self, path: Path, written: bool) -> None:
        """File ``path`` under created or skipped."""
        if written:
            self.files_created.append(path)
        else:
            self.files_skipped.append(path)


# =============================================================================
# Template Engine Setup
# =============================================================================


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for tscli's templates.

    Autoescaping is off since the output is source code and config
    files, and trailing newlines are preserved so generated files end
    with one.

    Returns
    -------
    Environment
        Environment loading from ``tscli/templates``.
    """
    return Environment(
        loader=PackageLoader("tscli", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(env: Environment, template_name: str, **context: object) -> str:
    """Render ``template_name`` with ``context``."""
    return env.get_template(template_name).render(**context)


# =============================================================================
# File System Helpers
# =============================================================================


def prepare_directory(path: Path) -> Path:
    """
    Make sure ``path`` exists as a directory.

    Missing parents are created; an existing directory is fine.

    Raises
    ------
    OSError
        If the directory cannot be created (permissions, a file in the
        way, a full disk).
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_file_if_not_exists(path: Path, content: str) -> bool:
    """
    Write ``content`` to ``path`` unless something is already there.

    The file is opened in exclusive-create mode, so an existing file is
    never truncated, even if it appears between a check and the write.

    Parameters
    ----------
    path : Path
        Destination file.

    content : str
        Text to write.

    Returns
    -------
    bool
        True if the file was written, False if it already existed.
    """
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        return False
    return True


def _report(project_dir: Path, path: Path, written: bool) -> None:
    relative = path.relative_to(project_dir)
    if written:
        console.print(f"  Created {relative}")
    else:
        console.print(f"  [dim]Skipped {relative} (already exists)[/]")


# =============================================================================
# Collaborators
# =============================================================================


def generate_package_json(project_dir: Path) -> bool:
    """
    Write package.json for the project if it has none.

    The package is named after the project directory.

    Returns
    -------
    bool
        True if package.json was written.
    """
    manifest = {
        "name": npm_package_name(project_dir.name),
        "version": "1.0.0",
        "description": "",
        "main": "index.tsx",
        "type": "module",
        "scripts": {
            "dev": "tsci dev",
            "build": "tsci build",
        },
    }
    content = json.dumps(manifest, indent=2) + "\n"
    return write_file_if_not_exists(project_dir / "package.json", content)


def generate_tsconfig(project_dir: Path, env: Environment | None = None) -> bool:
    """Write tsconfig.json if the project has none."""
    content = render_template(env or create_jinja_env(), "tsconfig.json.j2")
    return write_file_if_not_exists(project_dir / "tsconfig.json", content)


def generate_gitignore(project_dir: Path, env: Environment | None = None) -> bool:
    """Write .gitignore if the project has none."""
    content = render_template(env or create_jinja_env(), "gitignore.j2")
    return write_file_if_not_exists(project_dir / ".gitignore", content)


def setup_project_dependencies(
    project_dir: Path,
    settings: CliSettings,
) -> tuple[PackageManager, list[str]]:
    """
    Install the starter dev dependencies into the project.

    The package manager is detected from the environment and the
    project's lockfiles.

    Returns
    -------
    tuple[PackageManager, list[str]]
        The package manager and the command that was run.

    Raises
    ------
    DependencyInstallError
        If the install fails.
    """
    package_manager = detect_package_manager(project_dir)
    command = install_dependencies(
        project_dir,
        list(settings.starter_dependencies),
        package_manager,
    )
    return package_manager, command


# =============================================================================
# Main Initialization Function
# =============================================================================


def init_project(
    options: InitOptions,
    settings: CliSettings | None = None,
    *,
    version_source: VersionSource | None = None,
    verbose: bool = True,
) -> InitResult:
    """
    Initialize a tscircuit project.

    Parameters
    ----------
    options : InitOptions
        Target directory and feature switches for this run.

    settings : CliSettings | None
        Registry and version settings. Read from the environment when
        omitted.

    version_source : VersionSource | None
        Where to look up the latest CLI version. Defaults to the
        registry configured in ``settings``.

    verbose : bool, default=True
        Print progress and the completion panel.

    Returns
    -------
    InitResult
        What was written, skipped and installed.

    Raises
    ------
    OSError
        If the directory or a file cannot be written.
    DependencyInstallError
        If installing the starter dependencies fails.

    Notes
    -----
    The version check never raises and never stops initialization.
    Everything after it fails loudly.
    """
    settings = settings or get_settings()

    # Step 1: Advisory version check
    lookup: VersionLookup | None = None
    if options.check_version:
        source = version_source or RegistryVersionSource.from_settings(settings)
        lookup = check_for_updates(
            settings.current_version,
            source,
            detect_package_manager(options.cwd),
            settings.cli_package,
        )

    # Step 2: Prepare the target directory
    project_dir = prepare_directory(options.project_dir)
    result = InitResult(
        project_dir=project_dir,
        version_lookup=lookup,
        next_steps=options.next_steps,
    )

    if verbose:
        console.print()
        console.print(f"[bold]📁 Initializing project in[/] {project_dir}")

    # Step 3: Starter files
    env = create_jinja_env()
    for template_name, output_name in SCAFFOLD_TEMPLATES.items():
        content = render_template(env, template_name, options=options, settings=settings)
        path = project_dir / output_name
        written = write_file_if_not_exists(path, content)
        result.record(path, written)
        if verbose:
            _report(project_dir, path, written)

    # Step 4: Manifest, compiler config and ignore file
    for filename, written in (
        ("package.json", generate_package_json(project_dir)),
        ("tsconfig.json", generate_tsconfig(project_dir, env)),
        (".gitignore", generate_gitignore(project_dir, env)),
    ):
        path = project_dir / filename
        result.record(path, written)
        if verbose:
            _report(project_dir, path, written)

    # Step 5: Dependencies
    if options.install:
        if verbose:
            console.print()
        result.package_manager, result.install_command = setup_project_dependencies(
            project_dir, settings
        )

    if verbose:
        steps = "\n".join(f"  {step}" for step in result.next_steps)
        console.print()
        console.print(
            Panel(
                f"[bold green]🎉 Initialization complete![/]\n\n"
                f"[bold]Next steps:[/]\n"
                f"{steps}",
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return result
