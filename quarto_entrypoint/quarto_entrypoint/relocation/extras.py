"""Copy of static assets the rendered documents refer to."""

from __future__ import annotations

import logging
from pathlib import Path
from shutil import copy2, copytree
from typing import Iterable

from ..core.errors import MissingCopySource

logger = logging.getLogger(__name__)


def copy_file(parent_directory: Path, output_directory: Path, entry: str) -> Path:
    source = parent_directory / entry
    if not source.is_file():
        raise MissingCopySource(source, "file")

    destination = output_directory / entry
    destination.parent.mkdir(parents=True, exist_ok=True)
    copy2(source, destination)
    logger.debug(f"Copied file {source} to {destination}")
    return destination


def copy_folder(parent_directory: Path, output_directory: Path, entry: str) -> Path:
    source = parent_directory / entry
    if not source.is_dir():
        raise MissingCopySource(source, "folder")

    destination = output_directory / entry
    destination.parent.mkdir(parents=True, exist_ok=True)
    copytree(source, destination, dirs_exist_ok=True)
    logger.debug(f"Copied folder {source} to {destination}")
    return destination


def copy_extras(
    parent_directory: Path,
    output_directory: Path,
    files: Iterable[str],
    folders: Iterable[str],
) -> list[Path]:
    """Copy FILES_TO_COPY then FOLDERS_TO_COPY next to the rendered output.

    The first missing entry aborts the copy; nothing after it is copied.

    Args:
        parent_directory: Folder the entries are relative to
        output_directory: Destination folder
        files: Relative file paths, in order
        folders: Relative folder paths, in order

    Returns:
        Destination paths written

    Raises:
        MissingCopySource: An entry doesn't exist with the expected kind
    """
    copied = [copy_file(parent_directory, output_directory, f) for f in files]
    copied += [copy_folder(parent_directory, output_directory, d) for d in folders]
    if copied:
        logger.info(f"Copied {len(copied)} extra item(s) to {output_directory}")
    return copied
