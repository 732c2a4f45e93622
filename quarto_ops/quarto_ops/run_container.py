from __future__ import annotations

import argparse
import logging
import subprocess
from pathlib import Path

from quarto_entrypoint.rendering.process import run_logged

from ._utils import ensure, env_pairs, host_path

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "bosa/quarto"
CONTAINER_PROJECT = Path("/project")
LOG_LEVELS = ("info", "warning", "error", "critical")


def build_docker_command(
    *,
    image: str,
    input_dir: Path,
    output_dir: Path,
    env: dict[str, str | None],
    name: str | None = None,
) -> list[str]:
    cmd = ["docker", "run", "--rm"]
    if name:
        cmd += ["--name", name]
    cmd += [
        "-v",
        f"{host_path(input_dir)}:{CONTAINER_PROJECT / 'input'}",
        "-v",
        f"{host_path(output_dir)}:{CONTAINER_PROJECT / 'output'}",
    ]
    for key, value in env_pairs(env):
        cmd += ["-e", f"{key}={value}"]
    cmd.append(image)
    return cmd


def run_container(
    *,
    image: str,
    input_dir: Path,
    output_dir: Path,
    env: dict[str, str | None],
    name: str | None = None,
) -> int:
    ensure(["docker"])

    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input folder not found: {input_dir}")
    output_dir.mkdir(parents=True, exist_ok=True)

    cmd = build_docker_command(
        image=image, input_dir=input_dir, output_dir=output_dir, env=env, name=name
    )
    logger.info("Rendering %s into %s with %s", input_dir, output_dir, image)
    try:
        run_logged(cmd)
    except subprocess.CalledProcessError as exc:
        logger.error("Container exited with status %d", exc.returncode)
        return exc.returncode
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    parser = argparse.ArgumentParser(
        prog="quarto-render",
        description="Render Quarto documents of a local folder with the Docker image.",
    )
    parser.add_argument("--input", type=Path, default=Path("input"))
    parser.add_argument("--output", type=Path, default=Path("output"))
    parser.add_argument("--image", default=DEFAULT_IMAGE)
    parser.add_argument("--name", help="Container name.")
    parser.add_argument(
        "--input-file",
        help="File, file without .qmd or folder to render, relative to --input.",
    )
    parser.add_argument("--format", dest="output_format", help="Quarto --to format.")
    parser.add_argument("--log-level", choices=LOG_LEVELS)
    parser.add_argument("--files", help="Comma-separated files to copy.")
    parser.add_argument("--folders", help="Comma-separated folders to copy.")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    env = {
        "INPUT_FILE": args.input_file,
        "OUTPUT_FORMAT": args.output_format,
        "LOG_LEVEL": args.log_level,
        "FILES_TO_COPY": args.files,
        "FOLDERS_TO_COPY": args.folders,
        "DEBUG": "1" if args.debug else None,
    }

    return run_container(
        image=args.image,
        input_dir=args.input,
        output_dir=args.output,
        env=env,
        name=args.name,
    )


if __name__ == "__main__":
    raise SystemExit(main())
