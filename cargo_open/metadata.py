"""Resolve a crate name to its source directory via ``cargo metadata``."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

import semver

from . import config
from .errors import ManifestError, PackageNotFoundError
from .models import Metadata, PackageRecord

logger = logging.getLogger(__name__)


def load_metadata(manifest_path: Optional[Path | str] = None) -> Metadata:
    """Run ``cargo metadata`` for a manifest and parse the resolved graph.

    Args:
        manifest_path: Path to a ``Cargo.toml``. When omitted, cargo finds
            the nearest manifest from the current directory upwards.

    Returns:
        Parsed metadata with every package in the resolved graph.

    Raises:
        ManifestError: If the manifest is missing, or cargo cannot
            resolve it.
    """
    cmd = [config.CARGO_BIN, "metadata", "--format-version", config.METADATA_FORMAT_VERSION]
    if manifest_path is not None:
        path = Path(manifest_path).expanduser()
        if not path.is_file():
            raise ManifestError(f"Manifest not found: {path}")
        cmd += ["--manifest-path", str(path.resolve())]

    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as exc:
        raise ManifestError(f"Metadata error: could not run '{config.CARGO_BIN}': {exc}") from exc

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise ManifestError(f"Metadata error: {detail}")

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Metadata error: unreadable cargo output: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Metadata error: expected a JSON object from cargo, got {type(data).__name__}")

    metadata = Metadata.from_json(data)
    logger.debug("Resolved %d packages", len(metadata.packages))
    return metadata


def split_spec(spec: str) -> Tuple[str, Optional[str]]:
    """Split ``name@version`` into its parts."""
    name, sep, version = spec.partition("@")
    return name, (version if sep and version else None)


def find_package(spec: str, metadata: Metadata) -> PackageRecord:
    """Find a package by exact name, or ``name@version``.

    When several versions share the name, the highest one is returned.
    """
    name, version = split_spec(spec)
    matches: List[PackageRecord] = [p for p in metadata.packages if p.name == name]
    if version is not None:
        matches = [p for p in matches if p.version == version]
    if not matches:
        raise PackageNotFoundError(name, version)

    chosen = max(matches, key=lambda p: semver.Version.parse(p.version))
    if len(matches) > 1:
        others = ", ".join(sorted(p.version for p in matches if p is not chosen))
        logger.info("Multiple versions of %s resolved; using %s (also: %s)", name, chosen.version, others)
    return chosen


def package_root(package: PackageRecord) -> Path:
    return package.source_root


def locate(spec: str, manifest_path: Optional[Path | str] = None) -> Path:
    """Return the source directory of ``spec`` in the manifest's dependency graph."""
    metadata = load_metadata(manifest_path)
    package = find_package(spec, metadata)
    root = package_root(package)
    logger.debug("Located %s %s at %s", package.name, package.version, root)
    return root
