"""Environment-driven configuration for the container entrypoint."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .models import SOURCE_EXTENSION, BatchPolicy, RenderRequest


def split_csv(raw: str) -> list[str]:
    """Split a comma-delimited value into its non-blank, stripped items."""
    if not raw.strip():
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    project_folder: Path = Path("/project")
    input_file: str = f"index{SOURCE_EXTENSION}"
    output_format: str | None = None
    log_level: str | None = None
    files_to_copy: Annotated[list[str], NoDecode] = []
    folders_to_copy: Annotated[list[str], NoDecode] = []
    batch_policy: BatchPolicy = "all"
    log_file: Path = Path("/tmp/quarto.log")
    quarto_bin: str = "quarto"
    debug: bool = False

    @field_validator("files_to_copy", "folders_to_copy", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_csv(value)
        return value

    @field_validator("output_format", "log_level", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def input_root(self) -> Path:
        return self.project_folder / "input"

    @property
    def output_root(self) -> Path:
        return self.project_folder / "output"

    def to_request(self) -> RenderRequest:
        return RenderRequest(
            source_root=self.input_root,
            output_root=self.output_root,
            input_spec=self.input_file,
            output_format=self.output_format,
            log_level=self.log_level,
            files_to_copy=self.files_to_copy,
            folders_to_copy=self.folders_to_copy,
            batch_policy=self.batch_policy,
            log_file=self.log_file,
            quarto_bin=self.quarto_bin,
        )
