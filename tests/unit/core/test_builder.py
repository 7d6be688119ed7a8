"""
Unit tests for building the workspace graph from lockfile importers.
"""

import logging

import pytest

from wsgraph.core.builder import build_graph, load_graph, package_name, workspace_deps
from wsgraph.core.errors import LockfileNotFoundError, UnsupportedSchemaError
from wsgraph.core.types import Importer, LockedDependency
from wsgraph.parsing.lockfile import parse_lockfile


def _link(target: str) -> LockedDependency:
    return LockedDependency(specifier="workspace:*", version=f"link:{target}")


@pytest.fixture
def sample_graph(sample_lockfile):
    return build_graph(parse_lockfile(sample_lockfile).importers)


class TestBuildGraph:
    def test_root_importer_is_not_a_node(self, sample_graph):
        assert not sample_graph.has_node(".")
        assert "." not in sample_graph.node_ids()

    def test_one_node_per_importer(self, sample_graph):
        assert sample_graph.node_ids() == [
            "apps/focustoday-api",
            "apps/web",
            "libs/env-config",
            "libs/supabase/client",
            "libs/supabase/types",
            "libs/ui",
        ]

    def test_edges_from_links_only(self, sample_graph):
        assert sample_graph.dependencies_of("apps/focustoday-api") == {
            "libs/env-config",
            "libs/supabase/client",
        }
        assert sample_graph.dependencies_of("apps/web") == {"libs/ui"}
        assert sample_graph.dependencies_of("libs/env-config") == frozenset()

    def test_peer_dependencies_contribute_edges(self, sample_graph):
        assert sample_graph.dependencies_of("libs/supabase/client") == {
            "libs/supabase/types",
            "libs/env-config",
        }

    def test_optional_dependencies_do_not_contribute_edges(self, sample_graph):
        assert sample_graph.dependencies_of("libs/ui") == frozenset()

    def test_duplicate_links_collapse_to_one_edge(self, sample_graph):
        # env-config is declared in both dependencies and devDependencies
        edges = [e for e in sample_graph.iter_edges() if e[0] == "apps/focustoday-api"]
        assert edges.count(("apps/focustoday-api", "libs/env-config")) == 1
        assert sample_graph.edge_count == 5

    def test_names_from_last_segment(self, sample_graph):
        assert sample_graph.get_node("libs/supabase/client").name == "client"
        assert sample_graph.get_node("apps/web").name == "web"

    def test_colliding_names_are_kept_apart(self):
        graph = build_graph(
            {
                "apps/web/client": Importer(path="apps/web/client"),
                "libs/supabase/client": Importer(path="libs/supabase/client"),
            }
        )
        assert graph.node_count == 2
        assert {n.name for n in graph.iter_nodes()} == {"client"}

    def test_dangling_link_is_kept_as_edge(self):
        importers = {
            "apps/a": Importer(path="apps/a", dependencies={"ghost": _link("../../libs/ghost")}),
        }
        graph = build_graph(importers)

        assert graph.dependencies_of("apps/a") == {"libs/ghost"}
        assert not graph.has_node("libs/ghost")
        assert graph.dangling_targets() == {"libs/ghost"}

    def test_importer_path_taken_from_map_key(self):
        graph = build_graph(
            {"libs/b": Importer(dependencies={"c": _link("../c")})}
        )
        assert graph.dependencies_of("libs/b") == {"libs/c"}

    def test_empty_importer_map(self):
        graph = build_graph({})
        assert graph.node_count == 0
        assert graph.edge_count == 0


class TestHelpers:
    def test_package_name(self):
        assert package_name("apps/focustoday-api") == "focustoday-api"
        assert package_name("standalone") == "standalone"
        assert package_name("trailing/") == "trailing/"

    def test_workspace_deps_ignores_registry_versions(self):
        importer = Importer(
            path="apps/a",
            dependencies={
                "react": LockedDependency(specifier="^18", version="18.3.1"),
                "b": _link("../../libs/b"),
            },
            dev_dependencies={
                "c": LockedDependency(specifier="workspace:*", version="workspace:*"),
            },
        )
        assert workspace_deps(importer) == {"libs/b"}

    def test_workspace_deps_logs_skipped_entries(self, caplog):
        importer = Importer(
            path="apps/a",
            dependencies={
                "react": LockedDependency(specifier="^18", version="18.3.1"),
                "b": _link("../../libs/b"),
            },
        )
        with caplog.at_level(logging.DEBUG, logger="wsgraph.core.builder"):
            workspace_deps(importer)

        messages = [r.getMessage() for r in caplog.records]
        assert any("skipping dependencies react (18.3.1)" in m for m in messages)
        assert any("dependencies b -> libs/b" in m for m in messages)


class TestLoadGraph:
    def test_load_from_root(self, workspace):
        graph = load_graph(workspace)
        assert graph.node_count == 6

    def test_explicit_lockfile_path(self, tmp_path, sample_lockfile):
        lock_path = tmp_path / "custom" / "lock.yaml"
        lock_path.parent.mkdir()
        lock_path.write_text(sample_lockfile)

        graph = load_graph(tmp_path, lock_path)
        assert graph.has_node("apps/web")

    def test_missing_lockfile(self, tmp_path):
        with pytest.raises(LockfileNotFoundError):
            load_graph(tmp_path)

    def test_unsupported_schema_produces_no_graph(self, tmp_path):
        (tmp_path / "pnpm-lock.yaml").write_text("lockfileVersion: '6.0'\n")
        with pytest.raises(UnsupportedSchemaError):
            load_graph(tmp_path)
