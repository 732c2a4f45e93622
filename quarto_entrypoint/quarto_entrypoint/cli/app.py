"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from .. import pipeline
from ..core.errors import EntrypointError
from ..core.settings import Settings
from .parsers import (
    collect_overrides,
    parse_batch_policy,
    parse_csv_option,
    resolve_verbosity,
)

logger = logging.getLogger(__name__)

# http://patorjk.com/software/taag/#p=display&f=Big&t=Docker-quarto
BANNER = r"""
  _____             _                     ____                   _
 |  __ \           | |                   / __ \                 | |
 | |  | | ___   ___| | _____ _ __ ______| |  | |_   _  __ _ _ __| |_ ___
 | |  | |/ _ \ / __| |/ / _ \ '__|______| |  | | | | |/ _` | '__| __/ _ \
 | |__| | (_) | (__|   <  __/ |         | |__| | |_| | (_| | |  | || (_) |
 |_____/ \___/ \___|_|\_\___|_|          \___\_\\__,_|\__,_|_|   \__\___/
"""

app = typer.Typer(
    name="quarto-entrypoint",
    help="Render Quarto documents from /project/input into /project/output.",
    add_completion=False,
)


@app.command()
def render(
    input_file: Annotated[
        Optional[str],
        typer.Option(
            "--input-file",
            help="File, file without .qmd or folder relative to the input folder (env: INPUT_FILE).",
            metavar="PATH",
        ),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option(
            "--to",
            help="Output format passed to quarto --to (env: OUTPUT_FORMAT).",
            metavar="FORMAT",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Quarto log level: info, warning, error or critical (env: LOG_LEVEL).",
            metavar="LEVEL",
        ),
    ] = None,
    files_to_copy: Annotated[
        Optional[str],
        typer.Option(
            "--files",
            help="Comma-separated files to copy next to the output (env: FILES_TO_COPY).",
            metavar="LIST",
        ),
    ] = None,
    folders_to_copy: Annotated[
        Optional[str],
        typer.Option(
            "--folders",
            help="Comma-separated folders to copy next to the output (env: FOLDERS_TO_COPY).",
            metavar="LIST",
        ),
    ] = None,
    project_folder: Annotated[
        Optional[Path],
        typer.Option(
            "--project-folder",
            help="Folder holding the input and output mounts (env: PROJECT_FOLDER).",
            metavar="DIR",
        ),
    ] = None,
    batch_policy: Annotated[
        Optional[str],
        typer.Option(
            "--batch-policy",
            help="Documents of a folder to render: all, first or reject (env: BATCH_POLICY).",
            metavar="POLICY",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Show internal state while running."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only report warnings and errors."),
    ] = False,
) -> None:
    """Render Quarto documents and move the results to the output folder."""
    logging.basicConfig(
        level=resolve_verbosity(debug=debug, verbose=verbose, quiet=quiet),
        format="[%(levelname)s] %(message)s",
    )

    overrides = collect_overrides(
        input_file=input_file,
        output_format=output_format,
        log_level=log_level,
        files_to_copy=parse_csv_option(files_to_copy),
        folders_to_copy=parse_csv_option(folders_to_copy),
        project_folder=project_folder,
        batch_policy=parse_batch_policy(batch_policy),
        debug=True if debug else None,
    )

    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    if settings.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug(f"Config: {settings.model_dump_json()}")

    if not quiet:
        typer.echo(BANNER)

    request = settings.to_request()
    try:
        pipeline.run(request)
    except EntrypointError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
