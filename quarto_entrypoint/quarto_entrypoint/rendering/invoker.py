"""Invocation of ``quarto render`` for a single document."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..core.errors import RenderFailure
from ..core.models import RenderOutcome
from .logparse import read_produced_artifact
from .process import run_logged

logger = logging.getLogger(__name__)


def build_command(
    document: Path,
    log_file: Path,
    *,
    output_format: str | None = None,
    log_level: str | None = None,
    quarto_bin: str = "quarto",
) -> list[str]:
    """Build the render command line.

    Without ``--to`` Quarto falls back on the format declared in _quarto.yml,
    f.i.::

        format:
          html:
            theme: cosmo
    """
    cmd = [quarto_bin, "render", str(document), "--log", str(log_file)]
    if log_level:
        cmd += ["--log-level", log_level]
    if output_format:
        cmd += ["--to", output_format]
    return cmd


def remove_stale_log(log_file: Path) -> None:
    if log_file.is_file():
        logger.debug(f"Remove previous log {log_file}")
        log_file.unlink()


def invoke(
    document: Path,
    log_file: Path,
    *,
    output_format: str | None = None,
    log_level: str | None = None,
    quarto_bin: str = "quarto",
) -> RenderOutcome:
    """Render one document and read back what it produced.

    Args:
        document: Absolute path of the source document
        log_file: Transient log written by the renderer
        output_format: Optional ``--to`` override
        log_level: Optional ``--log-level`` value
        quarto_bin: Renderer executable

    Returns:
        Outcome holding the log path and the produced artifact, if logged

    Raises:
        RenderFailure: The renderer is missing or exited with a non-zero status
    """
    document = document.absolute()
    cmd = build_command(
        document,
        log_file,
        output_format=output_format,
        log_level=log_level,
        quarto_bin=quarto_bin,
    )

    remove_stale_log(log_file)

    try:
        run_logged(cmd, cwd=document.parent)
    except FileNotFoundError as exc:
        raise RenderFailure(document, None, f"{quarto_bin} not found") from exc
    except subprocess.CalledProcessError as exc:
        raise RenderFailure(document, exc.returncode) from exc

    artifact = read_produced_artifact(log_file)
    logger.debug(f"Generated file is {artifact}")
    return RenderOutcome(log_path=log_file, produced_artifact=artifact)
