"""Relocation of rendered artifacts from the input tree to the output tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..core.models import (
    CACHE_DIRECTORY,
    ProjectInfo,
    RenderOutcome,
    support_folder_name,
)

logger = logging.getLogger(__name__)


def remove_path(path: Path) -> None:
    """Delete a file, symlink or folder tree if it exists."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def replace_with(source: Path, destination: Path) -> Path:
    """Move ``source`` to ``destination``, discarding whatever was there."""
    remove_path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Move {source} to {destination}")
    shutil.move(str(source), str(destination))
    return destination


def prepare_output_directory(
    output_directory: Path, output_root: Path, *, reset: bool
) -> None:
    """Create the output folder, erasing a previous run's content first.

    The mounted output root itself is never erased.
    """
    if (
        reset
        and output_directory.is_dir()
        and output_directory.resolve() != output_root.resolve()
    ):
        logger.debug(f"Erase {output_directory} so old content doesn't linger")
        shutil.rmtree(output_directory)
    output_directory.mkdir(parents=True, exist_ok=True)


def artifact_relative_path(artifact: str, parent_directory: Path) -> Path | None:
    """Express a logged artifact path relative to the document folder."""
    candidate = Path(artifact)
    if candidate.is_absolute():
        try:
            candidate = candidate.relative_to(parent_directory.absolute())
        except ValueError:
            candidate = Path("..")
    if not candidate.parts or ".." in candidate.parts:
        logger.warning(
            f"Generated file {artifact} is outside {parent_directory}; not moved"
        )
        return None
    return candidate


def relocate(
    parent_directory: Path,
    output_directory: Path,
    document: str,
    outcome: RenderOutcome,
    *,
    output_root: Path,
    reset_output: bool = True,
    project: ProjectInfo | None = None,
) -> list[Path]:
    """Move everything the renderer generated for a document.

    Every step is optional: absent bundles, artifact or folders are skipped.

    Args:
        parent_directory: Folder holding the rendered document
        output_directory: Planned destination folder
        document: File name of the rendered document
        outcome: Result of the render, holding the logged artifact path
        output_root: Mounted output folder, never erased
        reset_output: Erase a pre-existing output folder before moving
        project: Project information used to find extra bundle folders

    Returns:
        Destination paths written
    """
    project = project or ProjectInfo()
    moved: list[Path] = []

    prepare_output_directory(output_directory, output_root, reset=reset_output)

    for bundle in project.bundle_directories():
        source = parent_directory / bundle
        if source.is_dir():
            moved.append(replace_with(source, output_directory / bundle))

    artifact = outcome.produced_artifact
    relative = artifact_relative_path(artifact, parent_directory) if artifact else None
    if relative is not None:
        source = parent_directory / relative
        if source.exists():
            moved.append(replace_with(source, output_directory / relative))
        else:
            logger.debug(f"Generated file {source} already moved or missing")

    cache = parent_directory / CACHE_DIRECTORY
    if cache.is_dir():
        moved.append(replace_with(cache, output_directory / CACHE_DIRECTORY))

    # Rendering blog.qmd generates blog_files with images, scripts, ...
    support_folder = support_folder_name(document)
    source = parent_directory / support_folder
    if source.is_dir():
        moved.append(replace_with(source, output_directory / support_folder))

    logger.debug(f"Moved {len(moved)} item(s) to {output_directory}")
    return moved
