"""Slash/dot path conversion."""

from __future__ import annotations


def path_to_segments(path: str | None) -> list[str]:
    """Split a slash separated path into its non-empty segments."""
    if not path:
        return []
    return [segment for segment in path.split("/") if segment]


def slash_path(path: str | None) -> str:
    """Normalize *path* to slash form without leading/trailing slashes."""
    return "/".join(path_to_segments(path))


def dot_path(path: str | None) -> str:
    """Convert a slash path to the dot form used by :func:`pyfirestate.state.tree.get_in`."""
    return ".".join(path_to_segments(path))
