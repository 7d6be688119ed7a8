"""
Report models.

JSON-ready views of a workspace graph consumed by the CLI renderers:
the whole-graph ``DepsReport`` and the single-package
``PackageInspection``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import REPORT_FORMAT, WorkspaceConfig
from ..core.errors import CyclicDependencyError
from ..core.graph import WorkspaceGraph
from ..core.types import PackageKind
from .architecture import classify_package
from .cycles import detect_cycles
from .dependents import build_dependents_map
from .toposort import topo_order


class PackageInfo(BaseModel):
    id: str
    path: str
    type: PackageKind
    deps_count: int
    dependents_count: int


class EdgeInfo(BaseModel):
    from_: str = Field(alias="from")
    to: str

    model_config = ConfigDict(populate_by_name=True)


class DepsReport(BaseModel):
    """
    Full enumeration of a workspace graph.

    Serialize with ``model_dump(by_alias=True)`` so edges use ``from``.
    """
    format: str = REPORT_FORMAT
    packages: List[PackageInfo] = Field(default_factory=list)
    edges: List[EdgeInfo] = Field(default_factory=list)
    cycles: List[List[str]] = Field(default_factory=list)


class PackageInspection(BaseModel):
    """Dependencies, dependents and build order of one package."""
    id: str
    type: PackageKind
    dependencies: List[str] = Field(default_factory=list)
    dependents: List[str] = Field(default_factory=list)
    build_order: Optional[List[str]] = None
    build_order_error: Optional[str] = None


def build_report(
    graph: WorkspaceGraph, config: Optional[WorkspaceConfig] = None
) -> DepsReport:
    """Assemble the JSON report for a whole graph."""
    dependents = build_dependents_map(graph)

    packages = [
        PackageInfo(
            id=node.id,
            path=node.path,
            type=classify_package(node.path, config),
            deps_count=len(node.deps),
            dependents_count=len(dependents.get(node.id, ())),
        )
        for node in graph.iter_nodes()
    ]
    edges = [EdgeInfo(from_=source, to=target) for source, target in graph.iter_edges()]

    return DepsReport(packages=packages, edges=edges, cycles=detect_cycles(graph))


def inspect_package(
    graph: WorkspaceGraph, node_id: str, config: Optional[WorkspaceConfig] = None
) -> PackageInspection:
    """
    Build the single-package view. A cyclic closure is reported in
    ``build_order_error`` rather than raised.
    """
    dependents = build_dependents_map(graph)

    inspection = PackageInspection(
        id=node_id,
        type=classify_package(node_id, config),
        dependencies=sorted(graph.dependencies_of(node_id)),
        dependents=sorted(dependents.get(node_id, ())),
    )

    try:
        inspection.build_order = topo_order(graph, node_id)
    except CyclicDependencyError as e:
        inspection.build_order_error = str(e)

    return inspection
