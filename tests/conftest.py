from __future__ import annotations

import stat
from pathlib import Path

import pytest

from quarto_entrypoint.core.models import RenderRequest

CONFIG_VARIABLES = (
    "PROJECT_FOLDER",
    "INPUT_FILE",
    "OUTPUT_FORMAT",
    "LOG_LEVEL",
    "FILES_TO_COPY",
    "FOLDERS_TO_COPY",
    "BATCH_POLICY",
    "LOG_FILE",
    "QUARTO_BIN",
    "DEBUG",
)

FAKE_QUARTO = """#!/bin/sh
# render <document> --log <logfile> [...]
doc="$2"
log="$4"
dir=$(dirname "$doc")
stem=$(basename "$doc" .qmd)
echo "$*" >> "{calls}"
if [ "${{FAKE_QUARTO_EXIT:-0}}" != "0" ]; then
    echo "ERROR: rendering failed" >&2
    exit "$FAKE_QUARTO_EXIT"
fi
echo "<html>$stem</html>" > "$dir/$stem.html"
mkdir -p "$dir/${{stem}}_files/libs"
echo "console.log('$stem')" > "$dir/${{stem}}_files/libs/app.js"
echo "Output created: $stem.html" > "$log"
"""


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CONFIG_VARIABLES + ("FAKE_QUARTO_EXIT",):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def project_folder(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "input").mkdir(parents=True)
    (root / "output").mkdir()
    return root


@pytest.fixture()
def calls_file(tmp_path: Path) -> Path:
    return tmp_path / "quarto-calls.txt"


@pytest.fixture()
def fake_quarto(tmp_path: Path, calls_file: Path) -> Path:
    """Shell stand-in for quarto producing an HTML file and a _files folder."""
    script = tmp_path / "bin" / "quarto"
    script.parent.mkdir()
    script.write_text(FAKE_QUARTO.format(calls=calls_file), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture()
def make_request(project_folder: Path, fake_quarto: Path, tmp_path: Path):
    def _make(**overrides: object) -> RenderRequest:
        values: dict[str, object] = {
            "source_root": project_folder / "input",
            "output_root": project_folder / "output",
            "input_spec": "index.qmd",
            "log_file": tmp_path / "quarto.log",
            "quarto_bin": str(fake_quarto),
        }
        values.update(overrides)
        return RenderRequest(**values)

    return _make


def write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
