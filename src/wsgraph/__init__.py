"""
wsgraph - Workspace dependency graph engine for pnpm monorepos.

Reads pnpm-lock.yaml (v9), resolves ``link:`` dependencies between
workspace packages, and answers questions about the resulting graph.

Key Components:
- parsing: Lockfile parser and workspace link resolver
- core: Data types, errors and the graph itself
- analysis: Cycles, build order, dependents and architecture checks
- cli: Thin command line presentation

Usage:
    from pathlib import Path
    from wsgraph import load_graph, detect_cycles, topo_order

    graph = load_graph(Path("."))
    cycles = detect_cycles(graph)
    order = topo_order(graph, "apps/web")
"""

__version__ = "0.1.0"

from .analysis.architecture import check_architecture, classify_package
from .analysis.cycles import detect_cycles
from .analysis.dependents import affected_packages, build_dependents_map
from .analysis.lookup import find_package
from .analysis.toposort import topo_order
from .core.builder import build_graph, load_graph
from .core.errors import (
    AmbiguousPackageError,
    CyclicDependencyError,
    LockfileNotFoundError,
    LockfileParseError,
    PackageNotFoundError,
    UnsupportedSchemaError,
    WsgraphError,
)
from .core.graph import WorkspaceGraph
from .core.types import ArchitectureViolation, Importer, Lockfile, PackageKind, PackageNode
from .parsing.links import resolve_workspace_link
from .parsing.lockfile import load_lockfile, parse_lockfile

__all__ = [
    "__version__",
    # Types
    "Importer",
    "Lockfile",
    "PackageNode",
    "PackageKind",
    "ArchitectureViolation",
    "WorkspaceGraph",
    # Errors
    "WsgraphError",
    "LockfileParseError",
    "LockfileNotFoundError",
    "UnsupportedSchemaError",
    "CyclicDependencyError",
    "PackageNotFoundError",
    "AmbiguousPackageError",
    # Pipeline
    "parse_lockfile",
    "load_lockfile",
    "resolve_workspace_link",
    "build_graph",
    "load_graph",
    # Analysis
    "detect_cycles",
    "topo_order",
    "build_dependents_map",
    "affected_packages",
    "check_architecture",
    "classify_package",
    "find_package",
]
