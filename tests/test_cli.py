from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import write
from quarto_entrypoint.cli import app
from quarto_entrypoint.cli.parsers import parse_batch_policy, resolve_verbosity

runner = CliRunner()


def _env(project_folder: Path, fake_quarto: Path, tmp_path: Path, **extra: str) -> dict[str, str]:
    env = {
        "PROJECT_FOLDER": str(project_folder),
        "QUARTO_BIN": str(fake_quarto),
        "LOG_FILE": str(tmp_path / "quarto.log"),
    }
    env.update(extra)
    return env


def test_cli_renders_blog(project_folder: Path, fake_quarto: Path, tmp_path: Path) -> None:
    write(project_folder / "input" / "blog" / "index.qmd")

    result = runner.invoke(
        app, [], env=_env(project_folder, fake_quarto, tmp_path, INPUT_FILE="blog")
    )

    assert result.exit_code == 0, result.output
    assert (project_folder / "output" / "blog" / "index.html").is_file()
    assert not (project_folder / "input" / "blog" / "index.html").exists()


def test_cli_options_override_environment(
    project_folder: Path, fake_quarto: Path, tmp_path: Path, calls_file: Path
) -> None:
    write(project_folder / "input" / "report.qmd")
    write(project_folder / "input" / "img" / "chart.png")

    result = runner.invoke(
        app,
        ["--input-file", "report", "--to", "html", "--folders", "img", "--quiet"],
        env=_env(project_folder, fake_quarto, tmp_path, INPUT_FILE="missing"),
    )

    assert result.exit_code == 0, result.output
    assert "--to html" in calls_file.read_text(encoding="utf-8")
    assert (project_folder / "output" / "report.html").is_file()
    assert (project_folder / "output" / "img" / "chart.png").is_file()


def test_cli_missing_mount_exits_with_one(
    tmp_path: Path, fake_quarto: Path, caplog: pytest.LogCaptureFixture
) -> None:
    result = runner.invoke(
        app, ["--project-folder", str(tmp_path / "nowhere"), "--quiet"]
    )

    assert result.exit_code == 1
    assert "please make sure to mount it" in caplog.text


def test_cli_missing_input_exits_with_one(
    project_folder: Path, fake_quarto: Path, tmp_path: Path
) -> None:
    result = runner.invoke(app, [], env=_env(project_folder, fake_quarto, tmp_path))

    assert result.exit_code == 1


def test_cli_render_failure_exits_with_one(
    project_folder: Path,
    fake_quarto: Path,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write(project_folder / "input" / "index.qmd")

    result = runner.invoke(
        app,
        [],
        env=_env(project_folder, fake_quarto, tmp_path, FAKE_QUARTO_EXIT="3"),
    )

    assert result.exit_code == 1
    assert "exit status 3" in caplog.text


def test_cli_invalid_batch_policy_exits_with_one(
    project_folder: Path, caplog: pytest.LogCaptureFixture
) -> None:
    result = runner.invoke(
        app, ["--project-folder", str(project_folder), "--batch-policy", "most"]
    )

    assert result.exit_code == 1
    assert "Invalid configuration" in caplog.text


def test_cli_invalid_batch_policy_from_environment(project_folder: Path) -> None:
    result = runner.invoke(
        app,
        ["--project-folder", str(project_folder)],
        env={"BATCH_POLICY": "most"},
    )

    assert result.exit_code == 1


def test_parse_batch_policy() -> None:
    assert parse_batch_policy(" First ") == "first"
    assert parse_batch_policy(None) is None


def test_resolve_verbosity() -> None:
    assert resolve_verbosity(debug=False, verbose=False, quiet=False) == logging.INFO
    assert resolve_verbosity(debug=True, verbose=False, quiet=True) == logging.DEBUG
    assert resolve_verbosity(debug=False, verbose=False, quiet=True) == logging.WARNING
