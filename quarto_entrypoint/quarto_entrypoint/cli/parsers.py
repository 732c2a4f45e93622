"""CLI argument parsers and validators."""

from __future__ import annotations

import logging
from typing import Any

from ..core.settings import split_csv


def parse_csv_option(value: str | None) -> list[str] | None:
    """Parse a comma-delimited option, keeping None for "not given"."""
    if value is None:
        return None
    return split_csv(value)


def parse_batch_policy(value: str | None) -> str | None:
    """Normalize --batch-policy; Settings rejects values outside all/first/reject."""
    if value is None:
        return None
    return value.strip().lower()


def resolve_verbosity(*, debug: bool, verbose: bool, quiet: bool) -> int:
    """Map the --debug/--verbose/--quiet flags to a logging level."""
    if debug or verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def collect_overrides(**options: Any) -> dict[str, Any]:
    """Drop options left unset so environment values still apply."""
    return {key: value for key, value in options.items() if value is not None}
