"""
tscli.config - Runtime Settings
===============================

Values that describe *where* tscli looks things up (registries, package
names) and *which* version is running. They are read once per invocation
from the environment using pydantic-settings, so every value can be
overridden without touching code:

    TSCI_CURRENT_VERSION=0.0.1 tsci init     # pretend to be an old release
    TSCI_VERSION_CHECK_TIMEOUT=1 tsci init   # give up on slow networks

List-valued settings are given as JSON:

    TSCI_STARTER_DEPENDENCIES='["@tscircuit/core"]' tsci init
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tscli import __version__


class CliSettings(BaseSettings):
    """
    Settings for a single tscli invocation.

    Attributes
    ----------
    current_version : str
        Version reported as "running". Defaults to the installed package
        version.

    cli_package : str
        Package name whose published version is compared against.

    registry_url : str
        Base URL of the package registry metadata API.

    scope : str
        Package scope served by the tscircuit registry.

    scope_registry_url : str
        Registry the scope is mapped to in the generated .npmrc.

    version_check_timeout : float
        Seconds to wait for the registry before giving up.

    starter_dependencies : list[str]
        Dev dependencies installed into every new project.
    """

    model_config = SettingsConfigDict(env_prefix="TSCI_", extra="ignore")

    current_version: str = Field(
        default=__version__,
        description="Version of the running CLI",
    )
    cli_package: str = Field(
        default="@tscircuit/cli",
        description="Published package name of the CLI",
    )
    registry_url: str = Field(
        default="https://registry.npmjs.org",
        description="Registry metadata endpoint",
    )
    scope: str = Field(
        default="@tsci",
        description="Scope served by the tscircuit registry",
    )
    scope_registry_url: str = Field(
        default="https://npm.tscircuit.com",
        description="Registry URL for the scope",
    )
    version_check_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for the registry lookup, in seconds",
    )
    starter_dependencies: list[str] = Field(
        default_factory=lambda: ["@types/react", "@tscircuit/core"],
        description="Dev dependencies installed into new projects",
    )

    @field_validator("registry_url", "scope_registry_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize registry URLs so paths can be appended safely."""
        return v.strip().rstrip("/")

    @field_validator("scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith("@") or len(v) < 2:
            msg = f"Invalid package scope '{v}'. Scopes look like '@name'."
            raise ValueError(msg)
        return v

    @property
    def metadata_url(self) -> str:
        """URL of the registry document describing ``cli_package``."""
        return f"{self.registry_url}/{self.cli_package}"


def get_settings() -> CliSettings:
    """Build settings from the current environment."""
    return CliSettings()
