"""
Core type definitions for wsgraph.

Lockfile records are validated with pydantic and frozen after parsing.
Graph nodes are frozen as well; a fresh graph is built per invocation.
"""

from enum import StrEnum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DependencyKind(StrEnum):
    """Dependency sections of a lockfile importer, keyed by their YAML name."""
    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"
    OPTIONAL_DEPENDENCIES = "optionalDependencies"
    PEER_DEPENDENCIES = "peerDependencies"


# Optional dependencies never contribute graph edges
GRAPH_DEPENDENCY_KINDS: Tuple[DependencyKind, ...] = (
    DependencyKind.DEPENDENCIES,
    DependencyKind.DEV_DEPENDENCIES,
    DependencyKind.PEER_DEPENDENCIES,
)


class PackageKind(StrEnum):
    """Layering category of a workspace package, derived from its path."""
    APP = "app"
    LIB = "lib"
    PACKAGE = "package"
    UNKNOWN = "unknown"


def major_version(version: str) -> str:
    """Major component of a lockfile version string, e.g. ``"9"`` for ``"9.0"``."""
    return version.strip().split(".", 1)[0]


class LockedDependency(BaseModel):
    """
    A single ``{specifier, version}`` entry of an importer.

    Only ``version`` matters to the engine; ``specifier`` is kept for
    display.
    """
    specifier: str
    version: str

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("specifier", "version", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        # YAML turns bare versions like 1.0 into floats
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Importer(BaseModel):
    """
    One workspace package as declared under ``importers`` in the lockfile.
    """
    path: str = ""
    dependencies: Dict[str, LockedDependency] = Field(default_factory=dict)
    dev_dependencies: Dict[str, LockedDependency] = Field(default_factory=dict)
    optional_dependencies: Dict[str, LockedDependency] = Field(default_factory=dict)
    peer_dependencies: Dict[str, LockedDependency] = Field(default_factory=dict)

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator(
        "dependencies",
        "dev_dependencies",
        "optional_dependencies",
        "peer_dependencies",
        mode="before",
    )
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        return {} if value is None else value

    def section(self, kind: DependencyKind) -> Dict[str, LockedDependency]:
        """Return the dependency mapping for one section."""
        return {
            DependencyKind.DEPENDENCIES: self.dependencies,
            DependencyKind.DEV_DEPENDENCIES: self.dev_dependencies,
            DependencyKind.OPTIONAL_DEPENDENCIES: self.optional_dependencies,
            DependencyKind.PEER_DEPENDENCIES: self.peer_dependencies,
        }[kind]

    def iter_dependencies(
        self, kinds: Iterable[DependencyKind] = GRAPH_DEPENDENCY_KINDS
    ) -> Iterator[Tuple[DependencyKind, str, LockedDependency]]:
        """Yield ``(kind, name, entry)`` for every entry in the given sections."""
        for kind in kinds:
            for name, entry in self.section(kind).items():
                yield kind, name, entry


class Lockfile(BaseModel):
    """
    The subset of a pnpm-lock.yaml document the engine reads.
    """
    lockfile_version: str
    importers: Dict[str, Importer] = Field(default_factory=dict)

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("lockfile_version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("importers", mode="before")
    @classmethod
    def _empty_importers(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {path: {} if body is None else body for path, body in value.items()}
        return value

    @field_validator("importers")
    @classmethod
    def _bind_paths(cls, value: Dict[str, Importer]) -> Dict[str, Importer]:
        return {
            path: importer.model_copy(update={"path": path})
            for path, importer in value.items()
        }

    @property
    def major_version(self) -> str:
        return major_version(self.lockfile_version)


class PackageNode(BaseModel):
    """
    One internal workspace package in the dependency graph.

    ``id`` is the canonical workspace-relative path. ``name`` is the last
    path segment and may collide across packages.
    """
    id: str
    name: str
    path: str
    deps: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    def sorted_deps(self) -> List[str]:
        return sorted(self.deps)


class ArchitectureViolation(BaseModel):
    """An application package depending on another application."""
    source: str
    target: str

    model_config = ConfigDict(frozen=True)

    @property
    def message(self) -> str:
        return f"Cross-app dependency: {self.source} → {self.target}"

    def __str__(self) -> str:
        return self.message
