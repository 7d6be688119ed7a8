"""
Dependents Index and change impact.

Inverts the graph edges so callers can ask "who depends on X", and
expands a set of changed files into every package that needs rebuilding.
"""

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional, Set

from ..core.graph import WorkspaceGraph

logger = logging.getLogger(__name__)


def build_dependents_map(graph: WorkspaceGraph) -> Dict[str, Set[str]]:
    """
    Build a map of package id -> ids of packages that depend on it.

    Every node gets an entry, empty when nothing depends on it. Dangling
    targets get no entry.
    """
    dependents: Dict[str, Set[str]] = {node_id: set() for node_id in graph.node_ids()}

    for source, target in graph.iter_edges():
        if target in dependents:
            dependents[target].add(source)

    return dependents


def find_roots(
    graph: WorkspaceGraph, dependents: Optional[Dict[str, Set[str]]] = None
) -> List[str]:
    """
    Get packages nothing depends on, sorted.

    When every package has a dependent (the graph is all cycles), every
    package id is returned instead so a tree view still has entry points.
    """
    if dependents is None:
        dependents = build_dependents_map(graph)

    roots = [node_id for node_id in graph.node_ids() if not dependents.get(node_id)]
    if not roots:
        roots = graph.node_ids()
    return sorted(roots)


def transitive_dependents(
    graph: WorkspaceGraph,
    node_ids: Iterable[str],
    dependents: Optional[Dict[str, Set[str]]] = None,
) -> Set[str]:
    """
    Get every package that directly or transitively depends on any of
    ``node_ids``. The given ids themselves are not included.
    """
    if dependents is None:
        dependents = build_dependents_map(graph)

    seeds = set(node_ids)
    visited: Set[str] = set()
    queue = deque(seeds)

    while queue:
        current = queue.popleft()
        for dependent in dependents.get(current, ()):
            if dependent not in visited:
                visited.add(dependent)
                queue.append(dependent)

    return visited - seeds


def _normalize_file(file_path: str) -> str:
    file_path = file_path.replace("\\", "/")
    while file_path.startswith("./"):
        file_path = file_path[2:]
    return file_path.lstrip("/")


def owning_package(graph: WorkspaceGraph, file_path: str) -> Optional[str]:
    """
    Get the package a workspace-relative file belongs to.

    The deepest package whose path is a prefix of the file wins, so files
    in nested packages are attributed to the inner one.
    """
    file_path = _normalize_file(file_path)
    best: Optional[str] = None
    for node_id in graph.node_ids():
        if file_path == node_id or file_path.startswith(f"{node_id}/"):
            if best is None or len(node_id) > len(best):
                best = node_id
    return best


def packages_for_paths(graph: WorkspaceGraph, files: Iterable[str]) -> List[str]:
    """Map changed files to their owning packages. Unowned files are skipped."""
    owners: Set[str] = set()
    for file_path in files:
        owner = owning_package(graph, file_path)
        if owner is None:
            logger.debug(f"No package owns {file_path}")
            continue
        owners.add(owner)
    return sorted(owners)


def affected_packages(graph: WorkspaceGraph, files: Iterable[str]) -> List[str]:
    """
    Get every package affected by a set of changed files: the owners of
    the files plus everything that transitively depends on them.
    """
    owners = packages_for_paths(graph, files)
    impacted = transitive_dependents(graph, owners)
    return sorted(set(owners) | impacted)
