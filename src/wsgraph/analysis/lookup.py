"""Package lookup by id or partial name."""

from ..core.errors import AmbiguousPackageError, PackageNotFoundError
from ..core.graph import WorkspaceGraph
from ..core.types import PackageNode


def find_package(graph: WorkspaceGraph, query: str) -> PackageNode:
    """
    Find a package by exact id, falling back to a substring match on id
    or path.

    Raises:
        PackageNotFoundError: If nothing matches.
        AmbiguousPackageError: If more than one package matches.
    """
    node = graph.get_node(query)
    if node is not None:
        return node

    matches = [
        n for n in graph.iter_nodes() if query in n.id or query in n.path
    ]

    if not matches:
        raise PackageNotFoundError(query)
    if len(matches) > 1:
        raise AmbiguousPackageError(query, [n.id for n in matches])
    return matches[0]
