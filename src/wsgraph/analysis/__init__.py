"""
Analysis module for wsgraph.

Read-only algorithms over a ``WorkspaceGraph``: cycle detection,
topological build order, the dependents index, architecture rules and
package lookup.
"""
