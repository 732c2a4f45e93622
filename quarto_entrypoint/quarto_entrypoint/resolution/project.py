"""Inspection of an optional Quarto project file next to the documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.models import ProjectInfo

logger = logging.getLogger(__name__)

PROJECT_FILES = ("_quarto.yml", "_quarto.yaml")


def find_project_file(directory: Path) -> Path | None:
    for name in PROJECT_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def inspect(directory: Path) -> ProjectInfo:
    """Read the project type and output-dir from ``_quarto.yml`` if present.

    An unreadable project file is reported and otherwise ignored; the renderer
    itself will complain about it in more detail.

    Args:
        directory: Folder holding the documents

    Returns:
        Project information, empty when the folder is not a Quarto project
    """
    config_path = find_project_file(directory)
    if config_path is None:
        logger.debug(f"{directory} is not a Quarto project")
        return ProjectInfo()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        logger.warning(f"Unable to parse {config_path}: {exc}")
        return ProjectInfo(config_path=config_path)

    project: Any = data.get("project") if isinstance(data, dict) else None
    if not isinstance(project, dict):
        return ProjectInfo(config_path=config_path)

    project_type = project.get("type")
    output_dir = project.get("output-dir")
    info = ProjectInfo(
        config_path=config_path,
        project_type=str(project_type) if project_type else None,
        output_dir=_normalize_output_dir(output_dir),
    )
    logger.debug(
        f"Quarto project {config_path}: type={info.project_type}, "
        f"output-dir={info.output_dir}"
    )
    return info


def _normalize_output_dir(value: Any) -> str | None:
    # Only a plain folder name directly under the project can be relocated
    if not isinstance(value, str):
        return None
    cleaned = value.strip().strip("/")
    if cleaned.startswith("./"):
        cleaned = cleaned[2:]
    if not cleaned or "/" in cleaned or cleaned in (".", ".."):
        return None
    return cleaned
