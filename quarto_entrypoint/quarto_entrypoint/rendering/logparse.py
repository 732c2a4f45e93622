"""Scraping of the renderer log for the produced artifact."""

from __future__ import annotations

import re
from pathlib import Path

OUTPUT_CREATED_PATTERN = re.compile(
    r"^.*?Output created: (?P<path>.+?)[ \t\r]*$", re.MULTILINE
)


def parse_output_created(text: str) -> str | None:
    """Return the path of the last ``Output created:`` line, if any."""
    matches = [m.group("path") for m in OUTPUT_CREATED_PATTERN.finditer(text)]
    matches = [path for path in matches if path]
    return matches[-1] if matches else None


def read_produced_artifact(log_file: Path) -> str | None:
    """Parse the artifact path out of a log file.

    A missing log is treated like a log without the line: the renderer only
    reports standalone artifacts, bundles are discovered by folder name.
    """
    if not log_file.is_file():
        return None
    return parse_output_created(log_file.read_text(encoding="utf-8", errors="replace"))
