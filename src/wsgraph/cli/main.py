"""
wsgraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import deps


@click.group()
@click.version_option(package_name="wsgraph")
def main():
    """wsgraph: Workspace dependency graph for pnpm monorepos.

    \b
    Quick Start:
      wsgraph deps tree
      wsgraph deps show web
      wsgraph deps check
    """
    pass


main.add_command(deps.deps)

if __name__ == "__main__":
    main()
