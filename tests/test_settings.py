from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from quarto_entrypoint.core.settings import Settings, split_csv


def test_defaults() -> None:
    settings = Settings()

    assert settings.input_file == "index.qmd"
    assert settings.output_format is None
    assert settings.log_level is None
    assert settings.files_to_copy == []
    assert settings.batch_policy == "all"
    assert settings.input_root == Path("/project/input")
    assert settings.output_root == Path("/project/output")


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_FILE", "blog")
    monkeypatch.setenv("OUTPUT_FORMAT", "pdf")
    monkeypatch.setenv("LOG_LEVEL", "critical")
    monkeypatch.setenv("FILES_TO_COPY", "a.txt, img/b.png,,")
    monkeypatch.setenv("FOLDERS_TO_COPY", "assets")
    monkeypatch.setenv("DEBUG", "1")

    settings = Settings()

    assert settings.input_file == "blog"
    assert settings.output_format == "pdf"
    assert settings.log_level == "critical"
    assert settings.files_to_copy == ["a.txt", "img/b.png"]
    assert settings.folders_to_copy == ["assets"]
    assert settings.debug is True


def test_empty_values_are_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTPUT_FORMAT", "")
    monkeypatch.setenv("LOG_LEVEL", "")
    monkeypatch.setenv("DEBUG", "")

    settings = Settings()

    assert settings.output_format is None
    assert settings.log_level is None
    assert settings.debug is False


def test_log_level_is_passed_verbatim(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert Settings().log_level == "chatty"


def test_invalid_batch_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BATCH_POLICY", "some")

    with pytest.raises(ValidationError):
        Settings()


def test_to_request(tmp_path: Path) -> None:
    request = Settings(project_folder=tmp_path, folders_to_copy="assets,css").to_request()

    assert request.source_root == tmp_path / "input"
    assert request.output_root == tmp_path / "output"
    assert request.folders_to_copy == ["assets", "css"]


def test_split_csv() -> None:
    assert split_csv(" a , b ,, c ") == ["a", "b", "c"]
    assert split_csv("   ") == []
