"""Command line interface for wsgraph."""
