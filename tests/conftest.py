"""Shared fixtures for wsgraph tests."""

from typing import Dict, Iterable

import pytest

from wsgraph.core.graph import WorkspaceGraph
from wsgraph.core.types import PackageNode


SAMPLE_LOCKFILE = """\
lockfileVersion: '9.0'

settings:
  autoInstallPeers: true
  excludeLinksFromLockfile: false

importers:

  .:
    devDependencies:
      turbo:
        specifier: ^2.0.0
        version: 2.0.4

  apps/focustoday-api:
    dependencies:
      '@repo/env-config':
        specifier: workspace:*
        version: link:../../libs/env-config
      '@repo/supabase-client':
        specifier: workspace:*
        version: link:../../libs/supabase/client
      hono:
        specifier: ^4.0.0
        version: 4.4.0
    devDependencies:
      '@repo/env-config':
        specifier: workspace:*
        version: link:../../libs/env-config

  apps/web:
    dependencies:
      '@repo/ui':
        specifier: workspace:*
        version: link:../../libs/ui
      react:
        specifier: ^18.2.0
        version: 18.3.1

  libs/env-config:
    dependencies:
      zod:
        specifier: ^3.23.0
        version: 3.23.8

  libs/supabase/client:
    dependencies:
      '@repo/supabase-types':
        specifier: workspace:*
        version: link:../types
    peerDependencies:
      '@repo/env-config':
        specifier: workspace:*
        version: link:../../env-config

  libs/supabase/types: {}

  libs/ui:
    optionalDependencies:
      '@repo/env-config':
        specifier: workspace:*
        version: link:../env-config

packages:

  zod@3.23.8:
    resolution: {integrity: sha512-abc}
"""


def make_graph(edges: Dict[str, Iterable[str]]) -> WorkspaceGraph:
    """Build a graph from ``{id: [dep ids]}`` without going through a lockfile."""
    return WorkspaceGraph(
        PackageNode(
            id=node_id,
            name=node_id.rsplit("/", 1)[-1],
            path=node_id,
            deps=frozenset(deps),
        )
        for node_id, deps in edges.items()
    )


@pytest.fixture
def sample_lockfile() -> str:
    return SAMPLE_LOCKFILE


@pytest.fixture
def workspace(tmp_path, sample_lockfile):
    """A workspace root containing the sample pnpm-lock.yaml."""
    (tmp_path / "pnpm-lock.yaml").write_text(sample_lockfile)
    return tmp_path


@pytest.fixture
def graph_factory():
    """Factory fixture: ``graph_factory({"a": ["b"], "b": []})``."""
    return make_graph
