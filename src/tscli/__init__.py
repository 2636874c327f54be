"""
tscli - tscircuit Command Line Tools
====================================

A CLI for starting tscircuit board projects. The ``init`` command
scaffolds a ready-to-run project: an example board, registry
configuration, package manifest, TypeScript config and .gitignore, and
then installs the starter dependencies with whichever package manager
you use.

Quick Start
-----------
```bash
# Scaffold into the current directory
tsci init

# Or into a new directory
tsci init my-board
cd my-board
tsci dev
```

Example
-------
>>> from tscli import InitOptions, init_project
>>> result = init_project(InitOptions(directory="my-board", install=False))
>>> result.project_dir.name
'my-board'

Architecture
------------
- ``cli``: Typer-based command line interface
- ``generator``: Directory preparation and scaffold emission
- ``version_check``: Advisory lookup of the latest published CLI version
- ``package_manager``: npm/yarn/pnpm/bun detection and installs
- ``config``: Environment-driven settings
- ``models``: Pydantic models for init options
- ``templates``: Jinja2 templates for generated files
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from tscli.config import CliSettings, get_settings
from tscli.generator import InitResult, init_project
from tscli.models import InitOptions, PackageManager
from tscli.version_check import (
    RegistryVersionSource,
    VersionAvailable,
    VersionUnavailable,
)


__all__ = [
    # Settings and options
    "CliSettings",
    "InitOptions",
    "PackageManager",
    # Version lookup
    "RegistryVersionSource",
    "VersionAvailable",
    "VersionUnavailable",
    # Version info
    "__version__",
    "get_settings",
    # Core functions
    "InitResult",
    "init_project",
]
