"""Quarto entrypoint - render mounted documents and relocate the results.

Runs inside the container: resolves the documents under /project/input,
renders them with Quarto one at a time and moves what was generated to
/project/output.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
