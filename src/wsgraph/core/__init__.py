"""
wsgraph Core Module.

Data types, the error taxonomy, and the immutable workspace graph with
its builder.
"""
