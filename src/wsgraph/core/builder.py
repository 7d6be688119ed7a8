"""
DAG Builder.

Assembles lockfile importers into a ``WorkspaceGraph``. Each importer
other than the workspace root becomes one node; its ``link:`` dependencies
(from dependencies, devDependencies and peerDependencies) become edges.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Set

from ..config import LOCKFILE_NAME, ROOT_IMPORTER
from ..parsing.links import resolve_workspace_link
from ..parsing.lockfile import load_lockfile
from .graph import WorkspaceGraph
from .types import Importer, PackageNode

logger = logging.getLogger(__name__)


def package_name(path: str) -> str:
    """Derive a display name from the last path segment."""
    name = path.rsplit("/", 1)[-1]
    return name or path


def workspace_deps(importer: Importer) -> Set[str]:
    """
    Collect the canonical paths of every workspace package an importer
    links to.
    """
    deps: Set[str] = set()
    for kind, name, entry in importer.iter_dependencies():
        target = resolve_workspace_link(importer.path, entry.version)
        if target is None:
            logger.debug(
                f"{importer.path}: skipping {kind.value} {name} ({entry.version}), "
                "not a workspace link"
            )
            continue
        logger.debug(f"{importer.path}: {kind.value} {name} -> {target}")
        deps.add(target)
    return deps


def build_graph(importers: Mapping[str, Importer]) -> WorkspaceGraph:
    """
    Build the workspace graph from an importer map.

    Args:
        importers: Importer records keyed by workspace-relative path, as
            produced by the lockfile parser.

    Returns:
        WorkspaceGraph with one node per non-root importer.
    """
    nodes = []
    for path, importer in importers.items():
        if path == ROOT_IMPORTER:
            continue
        if importer.path != path:
            importer = importer.model_copy(update={"path": path})

        nodes.append(
            PackageNode(
                id=path,
                name=package_name(path),
                path=path,
                deps=frozenset(workspace_deps(importer)),
            )
        )

    graph = WorkspaceGraph(nodes)

    dangling = graph.dangling_targets()
    if dangling:
        logger.debug(f"Dangling workspace links: {', '.join(sorted(dangling))}")
    logger.debug(f"Built graph: {graph.node_count} packages, {graph.edge_count} edges")
    return graph


def load_graph(root: Path, lockfile: Optional[Path] = None) -> WorkspaceGraph:
    """
    Load the workspace graph for a workspace root.

    Args:
        root: Workspace root directory.
        lockfile: Explicit lockfile path; defaults to ``root/pnpm-lock.yaml``.
    """
    lock_path = lockfile if lockfile is not None else root / LOCKFILE_NAME
    lock = load_lockfile(lock_path)
    return build_graph(lock.importers)
