"""Output folder derivation."""

from __future__ import annotations

from pathlib import Path


def plan(parent_directory: Path, source_root: Path, output_root: Path) -> Path:
    """Mirror the document folder under the output root.

    Converting ``input/blog/index.qmd`` lands in ``output/blog``. The offset is
    taken by prefix substitution on the textual paths.

    Args:
        parent_directory: Folder holding the document
        source_root: Mounted input folder
        output_root: Mounted output folder

    Returns:
        Folder receiving the rendered artifacts
    """
    parent = str(parent_directory).rstrip("/")
    root = str(source_root).rstrip("/")

    if parent == root:
        return output_root
    if not parent.startswith(root + "/"):
        raise ValueError(f"{parent_directory} is not located under {source_root}")

    return output_root / parent[len(root) + 1 :]
