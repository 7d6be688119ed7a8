"""
Architecture validation.

Packages are classified by path prefix. The only enforced rule is that an
application never depends on another application; every other combination
of kinds is allowed.
"""

from typing import List, Optional, Sequence

from ..config import WorkspaceConfig
from ..core.graph import WorkspaceGraph
from ..core.types import ArchitectureViolation, PackageKind


def _has_prefix(path: str, prefixes: Sequence[str]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def classify_package(path: str, config: Optional[WorkspaceConfig] = None) -> PackageKind:
    """Classify a package path as app, lib, package or unknown."""
    config = config or WorkspaceConfig()
    if _has_prefix(path, config.app_prefixes):
        return PackageKind.APP
    if _has_prefix(path, config.lib_prefixes):
        return PackageKind.LIB
    if _has_prefix(path, config.package_prefixes):
        return PackageKind.PACKAGE
    return PackageKind.UNKNOWN


def check_architecture(
    graph: WorkspaceGraph, config: Optional[WorkspaceConfig] = None
) -> List[ArchitectureViolation]:
    """
    Find every application -> application edge.

    Targets are classified by path even when they have no node.

    Returns:
        Violations sorted by (source, target). Empty means the check passes.
    """
    config = config or WorkspaceConfig()
    violations: List[ArchitectureViolation] = []

    for source, target in graph.iter_edges():
        if classify_package(source, config) is not PackageKind.APP:
            continue
        if classify_package(target, config) is PackageKind.APP:
            violations.append(ArchitectureViolation(source=source, target=target))

    return violations
