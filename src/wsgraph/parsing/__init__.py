"""
Parsing module for wsgraph.

- lockfile: pnpm-lock.yaml v9 parser
- links: ``link:`` dependency resolution relative to an importer
"""
