"""Error taxonomy surfaced to the user by the CLI."""

from __future__ import annotations


class CargoOpenError(Exception):
    """Base class for every failure cargo-open reports."""


class ManifestError(CargoOpenError):
    """The manifest is missing, malformed, or rejected by ``cargo metadata``."""


class PackageNotFoundError(CargoOpenError):
    """No package with the requested name exists in the resolved graph."""

    def __init__(self, name: str, version: str | None = None):
        self.name = name
        self.version = version
        label = f"{name}@{version}" if version else name
        super().__init__(f"Package not found: {label}")


class EditorNotConfiguredError(CargoOpenError):
    """None of the editor environment variables is set."""


class LaunchError(CargoOpenError):
    """The editor process could not be started."""
