"""
CLI Utilities - Shared helper functions for command line operations.

Graph loading for commands, logging setup, and formatted printing.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from ..config import WorkspaceConfig
from ..core.builder import load_graph
from ..core.errors import WsgraphError
from ..core.graph import WorkspaceGraph


def configure_logging(verbose: bool) -> None:
    """Send engine debug logs to stderr when --verbose is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def echo_error(message: str) -> None:
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def load_workspace(
    root: str, lockfile: Optional[str] = None
) -> Tuple[WorkspaceGraph, WorkspaceConfig]:
    """
    Load the graph and layout config for a workspace root.

    Exits with status 1 on any engine error, after printing it.
    """
    root_path = Path(root).resolve()
    lock_path = Path(lockfile).resolve() if lockfile else None

    try:
        config = WorkspaceConfig.for_root(root_path)
        graph = load_graph(root_path, lock_path)
    except (WsgraphError, ValueError) as e:
        echo_error(str(e))
        sys.exit(1)

    return graph, config
