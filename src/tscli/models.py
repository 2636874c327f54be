"""
tscli.models - Pydantic Models for Project Initialization
=========================================================

This module defines the data models used by ``tsci init``. Pydantic gives
us validation of user input (the optional directory argument) and
computed properties that keep path handling in one place.

Architecture Notes
------------------
    InitOptions
    ├── directory: str | None   (the CLI argument, as typed)
    ├── cwd: Path               (where the command was run)
    ├── install: bool
    └── check_version: bool

    PackageManager (enum)
    ├── npm
    ├── yarn
    ├── pnpm
    └── bun

Usage Example
-------------
>>> from pathlib import Path
>>> options = InitOptions(directory="boards/led", cwd=Path("/work"))
>>> options.project_dir
PosixPath('/work/boards/led')
>>> options.next_steps
['cd boards/led', 'tsci dev']
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


DEFAULT_PACKAGE_NAME = "tscircuit-project"


def npm_package_name(name: str) -> str:
    """
    Turn a directory name into a valid npm package name.

    Examples
    --------
    >>> npm_package_name("My Board")
    'my-board'
    >>> npm_package_name(".hidden")
    'hidden'
    """
    name = re.sub(r"[^a-z0-9._-]+", "-", name.lower())
    name = name.lstrip("._-").rstrip("-")
    return name or DEFAULT_PACKAGE_NAME


# =============================================================================
# Enumerations
# =============================================================================

class PackageManager(str, Enum):
    """
    JavaScript package managers tscli knows how to drive.

    The member value is also the executable name.

    Examples
    --------
    >>> PackageManager.PNPM.global_install("@tscircuit/cli@latest")
    'pnpm add -g @tscircuit/cli@latest'
    >>> PackageManager.NPM.dev_install_args(["@tscircuit/core"])
    ['npm', 'install', '--save-dev', '@tscircuit/core']
    """

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def lockfiles(self) -> tuple[str, ...]:
        """
        Lockfile names this package manager writes.

        Returns
        -------
        tuple[str, ...]
            File names, relative to the project root.
        """
        lockfiles = {
            PackageManager.NPM: ("package-lock.json",),
            PackageManager.YARN: ("yarn.lock",),
            PackageManager.PNPM: ("pnpm-lock.yaml",),
            PackageManager.BUN: ("bun.lockb", "bun.lock"),
        }
        return lockfiles[self]

    def global_install(self, package: str) -> str:
        """
        Shell command that installs ``package`` globally.

        Parameters
        ----------
        package : str
            Package specifier, e.g. ``@tscircuit/cli@latest``.

        Returns
        -------
        str
            A command the user can paste into a terminal.
        """
        prefixes = {
            PackageManager.NPM: "npm install -g",
            PackageManager.YARN: "yarn global add",
            PackageManager.PNPM: "pnpm add -g",
            PackageManager.BUN: "bun add -g",
        }
        return f"{prefixes[self]} {package}"

    def dev_install_args(self, packages: list[str]) -> list[str]:
        """
        Argument vector installing ``packages`` as dev dependencies.

        Parameters
        ----------
        packages : list[str]
            Package names to add.

        Returns
        -------
        list[str]
            Arguments suitable for ``subprocess.run``.
        """
        subcommands = {
            PackageManager.NPM: ["install", "--save-dev"],
            PackageManager.YARN: ["add", "--dev"],
            PackageManager.PNPM: ["add", "--save-dev"],
            PackageManager.BUN: ["add", "--dev"],
        }
        return [self.value, *subcommands[self], *packages]


# =============================================================================
# Init Options
# =============================================================================

class InitOptions(BaseModel):
    """
    Options for a single ``tsci init`` run.

    Attributes
    ----------
    directory : str | None
        Directory argument exactly as the user passed it. ``None`` means
        "initialize the current directory".

    cwd : Path
        Working directory the argument is resolved against.

    install : bool
        Whether to install starter dependencies after scaffolding.

    check_version : bool
        Whether to look up the latest published CLI version first.

    Examples
    --------
    >>> InitOptions(cwd=Path("/work")).project_dir
    PosixPath('/work')
    >>> InitOptions(directory="/abs/board", cwd=Path("/work")).project_dir
    PosixPath('/abs/board')
    """

    directory: str | None = Field(
        default=None,
        description="Target directory, relative to cwd or absolute",
    )
    cwd: Path = Field(
        default_factory=Path.cwd,
        description="Directory the command was run from",
    )
    install: bool = Field(
        default=True,
        description="Install starter dependencies",
    )
    check_version: bool = Field(
        default=True,
        description="Check the registry for a newer CLI release",
    )

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, v: str | None) -> str | None:
        """
        Reject blank directory arguments.

        An empty string would silently resolve to ``cwd`` while the
        completion message still suggests ``cd``.
        """
        if v is None:
            return None
        if not v.strip():
            msg = "Directory argument must not be empty."
            raise ValueError(msg)
        return v

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """
        Absolute path of the project being initialized.

        ``cwd`` itself when no directory was given, otherwise the
        directory resolved against ``cwd``. Symlinks are left alone and
        ``..`` segments are collapsed lexically.

        Returns
        -------
        Path
            The resolved target directory.
        """
        if self.directory is None:
            return self.cwd
        return Path(os.path.normpath(self.cwd / self.directory))

    @property
    def package_name(self) -> str:
        """
        npm package name derived from the project directory name.

        Returns
        -------
        str
            Lowercase name made of ``[a-z0-9._-]``.

        Examples
        --------
        >>> InitOptions(directory="My Board", cwd=Path("/w")).package_name
        'my-board'
        """
        return npm_package_name(self.project_dir.name)

    @property
    def next_steps(self) -> list[str]:
        """Commands suggested once initialization is complete."""
        steps = []
        if self.directory is not None:
            steps.append(f"cd {self.directory}")
        steps.append("tsci dev")
        return steps
