"""Pick the user's editor from the environment and run it."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional

from . import config
from .errors import EditorNotConfiguredError, LaunchError

logger = logging.getLogger(__name__)


def resolve_editor(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the editor command line from the first non-empty variable.

    Raises:
        EditorNotConfiguredError: If none of the editor variables is set,
            or the chosen one has unbalanced quotes.
    """
    env = os.environ if environ is None else environ
    for var in config.EDITOR_ENV_VARS:
        value = env.get(var, "").strip()
        if not value:
            continue
        try:
            command = shlex.split(value)
        except ValueError as exc:
            raise EditorNotConfiguredError(f"Cannot parse ${var}: {exc}") from exc
        if command:
            logger.debug("Using editor from $%s: %s", var, value)
            return command
    names = ", ".join(f"${var}" for var in config.EDITOR_ENV_VARS)
    raise EditorNotConfiguredError(f"Cannot resolve editor: set one of {names}")


def launch_editor(command: List[str], directory: Path) -> int:
    """Run the editor on ``directory`` and wait for it to exit.

    Returns:
        The editor's exit code.
    """
    argv = [*command, str(directory)]
    logger.debug("Launching %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as exc:
        raise LaunchError(f"Failed to launch editor '{command[0]}': {exc}") from exc
    return completed.returncode
