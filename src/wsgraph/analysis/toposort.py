"""
Topological sorting.

Computes the dependency-first build order for a package and its transitive
dependencies. A cycle anywhere in that closure is an error; the sorter
never breaks a cycle to produce a partial order.
"""

from typing import List, Set

from ..core.errors import CyclicDependencyError
from ..core.graph import WorkspaceGraph


def topo_order(graph: WorkspaceGraph, target: str) -> List[str]:
    """
    Get the build order for ``target``.

    Every id in the closure appears exactly once, after all of its own
    dependencies. The target itself is last. Ids without a node (including
    ``target``) are leaves.

    Args:
        graph: The workspace graph.
        target: Package id to order.

    Returns:
        Package ids, dependencies first.

    Raises:
        CyclicDependencyError: If the closure of ``target`` contains a cycle.
    """
    order: List[str] = []
    done: Set[str] = set()
    path: List[str] = []
    on_path: Set[str] = set()
    frames = []

    def enter(node_id: str) -> None:
        path.append(node_id)
        on_path.add(node_id)
        frames.append(iter(sorted(graph.dependencies_of(node_id))))

    enter(target)
    while frames:
        dep = next(frames[-1], None)

        if dep is None:
            frames.pop()
            node_id = path.pop()
            on_path.discard(node_id)
            done.add(node_id)
            order.append(node_id)
            continue

        if dep in done:
            continue
        if dep in on_path:
            raise CyclicDependencyError(path[path.index(dep):] + [dep])
        enter(dep)

    return order
