"""
Deps Command - Workspace dependency graph inspection.

Renders the graph built from pnpm-lock.yaml and runs the cycle and
architecture checks.

Usage:
    wsgraph deps tree              # Show dependency tree
    wsgraph deps json              # Machine-readable graph
    wsgraph deps show PACKAGE      # Dependencies, dependents, build order
    wsgraph deps check             # Cycles and architecture rules
    wsgraph deps affected FILE...  # Packages affected by changed files
"""

from __future__ import annotations

import json
import sys
from typing import Optional, Set, Tuple

import click
from rich.console import Console
from rich.tree import Tree

from ...analysis.architecture import check_architecture
from ...analysis.cycles import detect_cycles, format_cycle
from ...analysis.dependents import (
    affected_packages,
    build_dependents_map,
    find_roots,
)
from ...analysis.lookup import find_package
from ...analysis.report import build_report, inspect_package
from ...core.errors import WsgraphError
from ...core.graph import WorkspaceGraph
from ..utils import configure_logging, echo_error, load_workspace

console = Console()


def workspace_options(func):
    """Options shared by every deps command."""
    func = click.option(
        "--verbose", "-v", is_flag=True, help="Show engine debug logs"
    )(func)
    func = click.option(
        "--lockfile",
        type=click.Path(dir_okay=False),
        default=None,
        help="Lockfile path (defaults to ROOT/pnpm-lock.yaml)",
    )(func)
    func = click.option(
        "--root",
        "-r",
        type=click.Path(exists=True, file_okay=False),
        default=".",
        help="Workspace root directory",
    )(func)
    return func


@click.group()
def deps():
    """
    Inspect workspace package dependencies.

    The graph is built from the link: dependencies recorded in pnpm-lock.yaml.
    """
    pass


@deps.command("tree")
@workspace_options
def deps_tree(root: str, lockfile: Optional[str], verbose: bool):
    """
    Show dependency tree.

    Starts from every package nothing depends on.
    """
    configure_logging(verbose)
    graph, _ = load_workspace(root, lockfile)

    if len(graph) == 0:
        console.print("[yellow]No packages found in workspace[/yellow]")
        return

    tree = Tree("📦 [bold]Dependency Graph[/bold]")
    dependents = build_dependents_map(graph)
    for root_id in find_roots(graph, dependents):
        _add_branch(tree, graph, root_id, set())

    console.print(tree)
    console.print(f"[dim]Total: {len(graph)} packages[/dim]")


def _add_branch(parent: Tree, graph: WorkspaceGraph, node_id: str, path: Set[str]) -> None:
    if node_id in path:
        parent.add(f"{node_id} [red](cycle)[/red]")
        return

    label = node_id if graph.has_node(node_id) else f"{node_id} [dim](missing)[/dim]"
    branch = parent.add(label)

    path.add(node_id)
    for dep in sorted(graph.dependencies_of(node_id)):
        _add_branch(branch, graph, dep, path)
    path.discard(node_id)


@deps.command("json")
@workspace_options
def deps_json(root: str, lockfile: Optional[str], verbose: bool):
    """Output the dependency graph as JSON."""
    configure_logging(verbose)
    graph, config = load_workspace(root, lockfile)

    report = build_report(graph, config)
    click.echo(report.model_dump_json(by_alias=True, indent=2))


@deps.command("show")
@click.argument("package")
@workspace_options
def deps_show(package: str, root: str, lockfile: Optional[str], verbose: bool):
    """
    Show dependencies for a specific package.

    PACKAGE may be a full path or any unambiguous part of one.

    \b
    Examples:
        wsgraph deps show apps/web
        wsgraph deps show env-config
    """
    configure_logging(verbose)
    graph, config = load_workspace(root, lockfile)

    try:
        node = find_package(graph, package)
    except WsgraphError as e:
        echo_error(str(e))
        sys.exit(1)

    inspection = inspect_package(graph, node.id, config)

    console.print(f"📦 [bold blue]{node.id}[/bold blue] [dim]({inspection.type.value})[/dim]\n")

    console.print("[green]Dependencies:[/green]")
    _print_list(inspection.dependencies)

    console.print("[yellow]Dependents (packages that depend on this):[/yellow]")
    _print_list(inspection.dependents)

    console.print("[cyan]Build order (dependencies first):[/cyan]")
    if inspection.build_order_error:
        console.print(f"  ⚠️  [yellow]{inspection.build_order_error}[/yellow]")
        return

    for i, node_id in enumerate(inspection.build_order or [], start=1):
        marker = "→" if node_id == node.id else " "
        console.print(f"  {marker} {i}. {node_id}")


def _print_list(items) -> None:
    if not items:
        console.print("  [dim](none)[/dim]\n")
        return
    for item in items:
        console.print(f"  └── {item}")
    console.print()


@deps.command("check")
@workspace_options
def deps_check(root: str, lockfile: Optional[str], verbose: bool):
    """
    Check for circular dependencies and architecture violations.

    Exits with status 1 if any cycle or cross-app dependency is found.
    """
    configure_logging(verbose)
    graph, config = load_workspace(root, lockfile)

    console.print("🔍 [blue]Checking for circular dependencies...[/blue]\n")

    cycles = detect_cycles(graph)
    if cycles:
        console.print("[bold red]⚠️  Circular dependencies detected:[/bold red]\n")
        for i, cycle in enumerate(cycles, start=1):
            console.print(f"  {i}. {format_cycle(cycle)}")
        echo_error(f"{len(cycles)} circular dependency cycle(s) found")
        sys.exit(1)

    console.print("[green]✅ No circular dependencies detected[/green]\n")
    console.print("📋 [blue]Architecture validation:[/blue]")

    violations = check_architecture(graph, config)
    if violations:
        for violation in violations:
            console.print(f"  [red]✗[/red] {violation.message}")
        echo_error(f"{len(violations)} architecture violation(s) found")
        sys.exit(1)

    console.print("  [green]✓[/green] Apps only depend on libs")
    console.print("  [green]✓[/green] No cross-app dependencies")


@deps.command("affected")
@click.argument("files", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON list")
@workspace_options
def deps_affected(
    files: Tuple[str, ...],
    as_json: bool,
    root: str,
    lockfile: Optional[str],
    verbose: bool,
):
    """
    List packages affected by changed files.

    FILES are workspace-relative paths, e.g. from `git diff --name-only`.
    """
    configure_logging(verbose)
    graph, _ = load_workspace(root, lockfile)

    affected = affected_packages(graph, files)

    if as_json:
        click.echo(json.dumps(affected, indent=2))
        return

    if not affected:
        console.print("[dim]No workspace packages affected[/dim]")
        return

    console.print(f"[bold]Affected packages ({len(affected)}):[/bold]")
    for node_id in affected:
        console.print(f"  • {node_id}")
