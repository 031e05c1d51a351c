"""Non-mutating update primitives.

Both helpers always allocate a new container; callers can rely on the
previous snapshot staying untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any


def update_object(
    old_object: Mapping[str, Any] | None,
    new_values: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Return a copy of *old_object* with *new_values* laid over it."""
    updated: dict[str, Any] = dict(old_object or {})
    if new_values:
        updated.update(new_values)
    return updated


def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def update_item_in_array(
    items: Iterable[Any],
    item_id: Any,
    update_item: Callable[[Any], Any],
) -> list[Any]:
    """Replace the item whose ``id`` equals *item_id* with ``update_item(item)``.

    Every other item is passed through as the same object. When nothing
    matches the result is an element-for-element copy of *items*.
    """
    return [update_item(item) if _item_id(item) == item_id else item for item in items]
