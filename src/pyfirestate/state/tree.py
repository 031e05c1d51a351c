"""Deep get/set over dot-paths.

Reducers locate their branch with :func:`pyfirestate.state.meta.path_from_meta`
and write it back with :func:`set_in`. Writes copy every dict along the path
and share everything else with the previous tree.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

TreePath = str | Sequence[str]

_MISSING = object()


def _segments(path: TreePath) -> list[str]:
    if isinstance(path, str):
        return [segment for segment in path.split(".") if segment]
    return [segment for segment in map(str, path) if segment]


def get_in(tree: Any, path: TreePath, default: Any = None) -> Any:
    """Return the value at *path*, or *default* if any step is missing."""
    node = tree
    for segment in _segments(path):
        if not isinstance(node, Mapping):
            return default
        node = node.get(segment, _MISSING)
        if node is _MISSING:
            return default
    return node


def set_in(tree: Mapping[str, Any] | None, path: TreePath, value: Any) -> Any:
    """Return a new tree with *value* stored at *path*.

    Missing or non-mapping intermediate values are replaced by new dicts.
    An empty path returns *value* itself.
    """
    segments = _segments(path)
    if not segments:
        return value

    head, rest = segments[0], segments[1:]
    updated: dict[str, Any] = dict(tree) if isinstance(tree, Mapping) else {}
    if rest:
        child = updated.get(head)
        updated[head] = set_in(child if isinstance(child, Mapping) else None, rest, value)
    else:
        updated[head] = value
    return updated


def unset_in(tree: Mapping[str, Any] | None, path: TreePath) -> dict[str, Any]:
    """Return a new tree without the leaf at *path*."""
    updated: dict[str, Any] = dict(tree) if isinstance(tree, Mapping) else {}
    segments = _segments(path)
    if not segments:
        return updated

    head, rest = segments[0], segments[1:]
    if head not in updated:
        return updated
    if not rest:
        del updated[head]
        return updated
    child = updated[head]
    if isinstance(child, Mapping):
        updated[head] = unset_in(child, rest)
    return updated
