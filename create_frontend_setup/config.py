"""create-frontend-setup configuration.

Typed models for a single scaffolding run.  ``ScaffoldRequest`` is built once
from command-line input and never changes afterwards; ``ScaffoldSettings``
carries the CLI defaults and can be populated from environment variables.
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackageManager(str, Enum):
    """Package managers the scaffolder knows how to drive."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM


def resolve_package_manager(name: str | None) -> PackageManager:
    """Map a free-form manager name to a ``PackageManager``.

    Matching is exact (``"npm"``, ``"pnpm"``, ``"yarn"``, ``"bun"``).  Anything
    else, including ``None``, resolves to npm.
    """
    try:
        return PackageManager(name)
    except ValueError:
        return DEFAULT_PACKAGE_MANAGER


def is_known_package_manager(name: str | None) -> bool:
    """Return ``True`` if *name* is one of the supported managers."""
    return name in {pm.value for pm in PackageManager}


class ScaffoldRequest(BaseModel):
    """Everything a scaffolding run needs to know, validated up front."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(..., description="Directory name for the new app")
    package_manager: str = Field(
        default=DEFAULT_PACKAGE_MANAGER.value,
        description="npm | pnpm | yarn | bun (anything else falls back to npm)",
    )
    install: bool = Field(default=True, description="Install dependencies after generation")

    @field_validator("app_name")
    @classmethod
    def _app_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("app name must not be empty")
        return value

    @property
    def manager(self) -> PackageManager:
        """The package manager actually used for every command."""
        return resolve_package_manager(self.package_manager)


_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldSettings(BaseModel):
    """Defaults applied by the CLI when options are omitted."""

    package_manager: str = Field(default=DEFAULT_PACKAGE_MANAGER.value)
    install: bool = Field(default=True)

    @classmethod
    def from_env(cls) -> "ScaffoldSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            CFS_PACKAGE_MANAGER, CFS_NO_INSTALL.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CFS_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CFS_PACKAGE_MANAGER"].strip()
        if os.environ.get("CFS_NO_INSTALL"):
            kwargs["install"] = os.environ["CFS_NO_INSTALL"].strip().lower() not in _TRUTHY
        return cls(**kwargs)
