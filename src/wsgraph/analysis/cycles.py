"""
Cycle detection.

Reports every distinct dependency cycle as data. A cycle is a list of
package ids where each id depends on the next and the last depends on the
first. Cycles with the same node set are reported once, whichever entry
point discovered them first.
"""

import logging
from typing import Iterator, List, Sequence, Set

from ..core.graph import WorkspaceGraph

logger = logging.getLogger(__name__)


def cycles_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """Check if two cycles cover the same nodes, ignoring rotation and direction."""
    if len(a) != len(b):
        return False
    return set(a) == set(b)


def _sorted_deps(graph: WorkspaceGraph, node_id: str) -> Iterator[str]:
    return iter(sorted(graph.dependencies_of(node_id)))


def detect_cycles(graph: WorkspaceGraph) -> List[List[str]]:
    """
    Find all distinct cycles in the graph.

    Depth-first search from every unvisited node (in id order) keeping the
    current path on an explicit stack. An edge back into the current path
    closes a cycle, which is the path slice from that node to the tip.

    Returns:
        Cycles in discovery order. Empty when the graph is acyclic.
    """
    cycles: List[List[str]] = []
    visited: Set[str] = set()

    for start in graph.node_ids():
        if start in visited:
            continue

        visited.add(start)
        path: List[str] = [start]
        on_path: Set[str] = {start}
        frames = [_sorted_deps(graph, start)]

        while frames:
            dep = next(frames[-1], None)

            if dep is None:
                frames.pop()
                on_path.discard(path.pop())
                continue

            if dep not in visited:
                visited.add(dep)
                path.append(dep)
                on_path.add(dep)
                frames.append(_sorted_deps(graph, dep))
            elif dep in on_path:
                cycle = path[path.index(dep):]
                # Nodes expand once, so only distinct back edges can repeat a node set
                if not any(cycles_equal(c, cycle) for c in cycles):
                    logger.debug(f"Cycle found: {' -> '.join(cycle)}")
                    cycles.append(cycle)

    return cycles


def format_cycle(cycle: Sequence[str]) -> str:
    """Render a cycle closed on its first node, e.g. ``a → b → a``."""
    if not cycle:
        return ""
    return " → ".join([*cycle, cycle[0]])
