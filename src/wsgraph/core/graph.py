"""
Workspace dependency graph.

An immutable mapping from package id to ``PackageNode`` for one lockfile
snapshot. Edges live on the nodes (``PackageNode.deps``) and may point at
ids that have no node; such dangling targets behave as leaves.
"""

from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from .types import PackageNode


class WorkspaceGraph:
    """
    Read-only graph of internal workspace packages.

    Every enumeration (``iter_nodes``, ``iter_edges``, ``node_ids``) is sorted
    by id so that downstream algorithms and output are deterministic.
    """

    def __init__(self, nodes: Iterable[PackageNode] = ()):
        self._nodes: Dict[str, PackageNode] = {}
        for node in sorted(nodes, key=lambda n: n.id):
            if node.id in self._nodes:
                raise ValueError(f"Duplicate package id: {node.id}")
            self._nodes[node.id] = node

    def get_node(self, node_id: str) -> Optional[PackageNode]:
        """Retrieve a node by id."""
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists."""
        return node_id in self._nodes

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def node_ids(self) -> List[str]:
        return list(self._nodes)

    def iter_nodes(self) -> Iterator[PackageNode]:
        return iter(self._nodes.values())

    def dependencies_of(self, node_id: str) -> FrozenSet[str]:
        """Direct dependency ids of a node; empty for unknown ids."""
        node = self._nodes.get(node_id)
        if node is None:
            return frozenset()
        return node.deps

    def iter_edges(self) -> Iterator[Tuple[str, str]]:
        """Yield every ``(source, target)`` edge, sorted."""
        for node in self._nodes.values():
            for dep in node.sorted_deps():
                yield node.id, dep

    def dangling_targets(self) -> Set[str]:
        """Edge targets that have no corresponding node."""
        return {
            target for _, target in self.iter_edges() if target not in self._nodes
        }

    def closure(self, node_id: str) -> Set[str]:
        """
        Get the transitive dependency closure of a node, including itself.

        Dangling targets are part of the closure but contribute nothing
        further.
        """
        seen: Set[str] = {node_id}
        stack = [node_id]
        while stack:
            current = stack.pop()
            for dep in self.dependencies_of(current):
                if dep not in seen:
                    seen.add(dep)
                    stack.append(dep)
        return seen

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.deps) for node in self._nodes.values())
