"""
Workspace link resolution.

A dependency is workspace-internal only when its resolved version uses the
``link:`` scheme, e.g. ``link:../../libs/env-config``. Registry versions,
ranges, tags and other protocols (``workspace:``, ``file:``, ``npm:``) are
not links and resolve to nothing.
"""

from typing import List, Optional

from ..config import LINK_PREFIX


def normalize_path(path: str) -> str:
    """
    Normalize a ``/``-separated path.

    ``..`` pops the previous segment (popping past the start is a no-op),
    ``.`` and empty segments are dropped. A leading ``/`` is discarded.
    """
    segments: List[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return "/".join(segments)


def is_workspace_link(version: str) -> bool:
    """Check whether a resolved version string is a workspace link."""
    return version.startswith(LINK_PREFIX)


def resolve_workspace_link(importer_path: str, version: str) -> Optional[str]:
    """
    Resolve a link version relative to the importer that declares it.

    Args:
        importer_path: Workspace-relative path of the declaring importer.
        version: The dependency's resolved version string.

    Returns:
        The canonical workspace-relative target path, or None when the
        version is not a link.

    Example:
        >>> resolve_workspace_link("libs/supabase/client", "link:../types")
        'libs/supabase/types'
    """
    if not is_workspace_link(version):
        return None

    link_path = version[len(LINK_PREFIX):]

    # Absolute link paths replace the importer directory entirely
    if link_path.startswith("/"):
        return normalize_path(link_path)

    return normalize_path(f"{importer_path}/{link_path}")
