"""
CLI Commands Package.

Each command group is implemented in its own module.
"""

from . import deps

__all__ = ["deps"]
