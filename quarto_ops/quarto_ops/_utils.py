from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Iterable


def ensure(commands: Iterable[str]) -> None:
    for name in commands:
        if shutil.which(name) is None:
            sys.stderr.write(f"missing dependency: {name}\n")
            sys.exit(1)


def host_path(path: Path) -> str:
    """Absolute host path, as docker requires for bind mounts."""
    return str(path.expanduser().resolve())


def env_pairs(values: dict[str, str | None]) -> list[tuple[str, str]]:
    return [(key, value) for key, value in values.items() if value]
