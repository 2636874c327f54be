"""
tscli.version_check - Advisory Latest-Version Lookup
====================================================

Before scaffolding, ``tsci init`` tells the user whether a newer CLI
release is available. The lookup is best-effort: whatever goes wrong
(no network, registry error, unexpected JSON) is turned into a
``VersionUnavailable`` value and reported as a single warning.
Initialization always continues.

The transport sits behind the small ``VersionSource`` protocol so it can
be swapped (or faked in tests) without touching the init flow:

    class VersionSource(Protocol):
        def fetch_latest_version(self) -> VersionLookup: ...

``RegistryVersionSource`` is the HTTP implementation. It reads
``dist-tags.latest`` from the registry metadata document, e.g.
``https://registry.npmjs.org/@tscircuit/cli``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import httpx
from rich.console import Console

from tscli.models import PackageManager


if TYPE_CHECKING:
    from tscli.config import CliSettings


console = Console()


# =============================================================================
# Lookup Result Types
# =============================================================================


@dataclass(frozen=True)
class VersionAvailable:
    """The registry reported ``version`` as the latest release."""

    version: str


@dataclass(frozen=True)
class VersionUnavailable:
    """The latest version could not be determined."""

    reason: str


VersionLookup = VersionAvailable | VersionUnavailable


class VersionSource(Protocol):
    """Anything that can report the latest published CLI version."""

    def fetch_latest_version(self) -> VersionLookup: ...


# =============================================================================
# Registry Transport
# =============================================================================


class RegistryVersionSource:
    """
    Look up the latest version from a package registry over HTTP.

    Parameters
    ----------
    url : str
        Metadata document URL for the package.

    timeout : float, default=5.0
        Seconds to wait before giving up.

    client : httpx.Client | None
        Client to send the request with. A short-lived client is created
        per lookup when omitted.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: CliSettings) -> RegistryVersionSource:
        return cls(settings.metadata_url, timeout=settings.version_check_timeout)

    def fetch_latest_version(self) -> VersionLookup:
        """
        Fetch ``dist-tags.latest`` for the package.

        Returns
        -------
        VersionLookup
            ``VersionAvailable`` on success, ``VersionUnavailable`` with a
            short reason otherwise. Never raises for transport or payload
            problems.
        """
        try:
            if self._client is not None:
                response = self._client.get(self.url, timeout=self.timeout)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            return VersionUnavailable(f"registry returned HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return VersionUnavailable(f"request failed: {e.__class__.__name__}")
        except ValueError:
            return VersionUnavailable("registry response was not valid JSON")

        dist_tags = data.get("dist-tags") if isinstance(data, dict) else None
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if not isinstance(latest, str) or not latest.strip():
            return VersionUnavailable("registry response has no dist-tags.latest")

        return VersionAvailable(latest.strip())


# =============================================================================
# Reporting
# =============================================================================


def check_for_updates(
    current_version: str,
    source: VersionSource,
    package_manager: PackageManager,
    cli_package: str = "@tscircuit/cli",
) -> VersionLookup:
    """
    Compare the running version with the latest release and report it.

    Parameters
    ----------
    current_version : str
        Version of the running CLI.

    source : VersionSource
        Where to look up the latest version.

    package_manager : PackageManager
        Used to phrase the suggested upgrade command.

    cli_package : str
        Package name used in the upgrade command.

    Returns
    -------
    VersionLookup
        The lookup outcome, for callers that want to record it.
    """
    lookup = source.fetch_latest_version()

    if isinstance(lookup, VersionUnavailable):
        console.print(
            "[yellow]⚠️  Could not check the latest version. "
            "Please check your network connection.[/]"
        )
        console.print(f"[dim]   ({lookup.reason})[/]")
        return lookup

    if lookup.version == current_version.strip():
        console.print(
            f"[green]✅ You are using the latest version ({current_version}).[/]"
        )
    else:
        upgrade = package_manager.global_install(f"{cli_package}@latest")
        console.print(
            f"[yellow]⚠️  You are using version {current_version}, "
            f"but the latest version is {lookup.version}.[/]"
        )
        console.print(f"[yellow]   Consider updating with:[/] {upgrade}")

    return lookup
