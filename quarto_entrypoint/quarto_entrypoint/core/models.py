"""Domain models for document resolution, rendering and relocation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field

SOURCE_EXTENSION = ".qmd"
BUNDLE_DIRECTORIES = ("_book", "_site")
CACHE_DIRECTORY = ".quarto"
SUPPORT_FOLDER_SUFFIX = "_files"

BatchPolicy = Literal["all", "first", "reject"]


class RenderRequest(BaseModel):
    """Everything a run needs, fixed at startup."""

    model_config = ConfigDict(frozen=True)

    source_root: Path = Field(..., description="Mounted input folder")
    output_root: Path = Field(..., description="Mounted output folder")
    input_spec: str = Field(..., description="File, extension-less file or folder")
    output_format: str | None = Field(default=None, description="--to override")
    log_level: str | None = Field(default=None, description="--log-level value")
    files_to_copy: list[str] = Field(default_factory=list)
    folders_to_copy: list[str] = Field(default_factory=list)
    batch_policy: BatchPolicy = Field(default="all")
    log_file: Path = Field(default=Path("/tmp/quarto.log"))
    quarto_bin: str = Field(default="quarto")


class ResolvedDocumentSet(BaseModel):
    """Source documents sharing one parent folder."""

    model_config = ConfigDict(frozen=True)

    parent_directory: Path
    documents: list[str] = Field(..., min_length=1)

    def paths(self) -> Iterator[Path]:
        for name in self.documents:
            yield self.parent_directory / name


class OutputPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_directory: Path


class RenderOutcome(BaseModel):
    """Result of one renderer invocation."""

    model_config = ConfigDict(frozen=True)

    log_path: Path
    produced_artifact: str | None = None


class ProjectInfo(BaseModel):
    """What the optional _quarto.yml tells us about generated folders."""

    model_config = ConfigDict(frozen=True)

    config_path: Path | None = None
    project_type: str | None = None
    output_dir: str | None = None

    def bundle_directories(self) -> tuple[str, ...]:
        names = BUNDLE_DIRECTORIES
        if self.output_dir and self.output_dir not in names:
            names = names + (self.output_dir,)
        return names


def support_folder_name(document: str) -> str:
    """Name of the per-document asset folder, f.i. ``blog_files`` for ``blog.qmd``."""
    stem = document
    if stem.endswith(SOURCE_EXTENSION):
        stem = stem[: -len(SOURCE_EXTENSION)]
    return f"{stem}{SUPPORT_FOLDER_SUFFIX}"
