"""Subprocess execution for external tools."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def format_command(cmd: Iterable[str]) -> str:
    return " ".join(shlex.quote(part) for part in cmd)


def run_logged(
    cmd: Iterable[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """
    Run a subprocess with its stdout/stderr going straight to the caller's.
    Returns the CompletedProcess; raises CalledProcessError when check=True.
    """
    cmd_list = list(cmd)
    logger.debug(f"Running: {format_command(cmd_list)}")

    result = subprocess.run(cmd_list, cwd=cwd, text=True)
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(result.returncode, result.args)
    return result
