"""Data models built from ``cargo metadata`` output."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class PackageRecord:
    name: str
    version: str
    id: str
    manifest_path: Path

    @property
    def source_root(self) -> Path:
        return self.manifest_path.parent

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PackageRecord":
        return cls(
            name=data["name"],
            version=data["version"],
            id=data.get("id", ""),
            manifest_path=Path(data["manifest_path"]),
        )


@dataclass
class Metadata:
    packages: List[PackageRecord] = field(default_factory=list)
    workspace_root: Path | None = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Metadata":
        root = data.get("workspace_root")
        return cls(
            packages=[PackageRecord.from_json(p) for p in data.get("packages", [])],
            workspace_root=Path(root) if root else None,
        )
