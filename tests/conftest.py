"""Pytest configuration and fixtures for cargo-open tests."""

import subprocess
from pathlib import Path
from typing import List

import pytest

CLAP_ROOT = Path("/home/dev/.cargo/registry/src/index.crates.io-6f17d22bba15001f/clap-4.5.4")

SAMPLE_MANIFEST = """\
[package]
name = "demo"
version = "0.1.0"
edition = "2021"

[dependencies]
clap = "4"
syn = "2"
serde_derive = "1"
"""


class FakeProcesses:
    """Stand-in for ``subprocess.run`` that answers cargo and editor calls.

    ``cargo metadata`` calls get the fixture JSON; anything else is treated
    as an editor launch and exits with ``editor_returncode``.
    """

    def __init__(self, metadata_stdout: str):
        self.calls: List[List[str]] = []
        self.metadata_stdout = metadata_stdout
        self.metadata_stderr = ""
        self.metadata_returncode = 0
        self.editor_returncode = 0
        self.missing: set = set()

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        if argv[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if len(argv) > 1 and argv[1] == "metadata":
            return subprocess.CompletedProcess(
                argv,
                self.metadata_returncode,
                stdout=self.metadata_stdout,
                stderr=self.metadata_stderr,
            )
        return subprocess.CompletedProcess(argv, self.editor_returncode)

    @property
    def metadata_calls(self) -> List[List[str]]:
        return [c for c in self.calls if len(c) > 1 and c[1] == "metadata"]

    @property
    def editor_calls(self) -> List[List[str]]:
        return [c for c in self.calls if not (len(c) > 1 and c[1] == "metadata")]


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep the developer's editor and cargo settings out of the tests."""
    for var in ("CARGO_EDITOR", "VISUAL", "EDITOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("cargo_open.config.CARGO_BIN", "cargo")


@pytest.fixture
def metadata_json() -> str:
    """Recorded ``cargo metadata`` output for the sample manifest."""
    return (Path(__file__).parent / "fixtures" / "cargo_metadata.json").read_text(encoding="utf-8")


@pytest.fixture
def sample_manifest(tmp_path: Path) -> Path:
    """A Cargo.toml on disk declaring clap, syn and serde_derive."""
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text(SAMPLE_MANIFEST, encoding="utf-8")
    return manifest


@pytest.fixture
def fake_processes(monkeypatch, metadata_json: str) -> FakeProcesses:
    """Patch ``subprocess.run`` so no real cargo or editor is started."""
    fake = FakeProcesses(metadata_json)
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def clap_root() -> Path:
    """Source directory of clap as recorded in the fixture metadata."""
    return CLAP_ROOT
