"""Environment-driven settings for cargo-open."""

from __future__ import annotations

import os

# Checked in order; the first non-empty value names the editor.
EDITOR_ENV_VARS = ("CARGO_EDITOR", "VISUAL", "EDITOR")

# Cargo exports CARGO to the subcommands it runs.
CARGO_BIN = os.environ.get("CARGO", "cargo")

METADATA_FORMAT_VERSION = "1"

LOG_LEVEL = os.environ.get("CARGO_OPEN_LOG", "WARNING").upper()
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"
