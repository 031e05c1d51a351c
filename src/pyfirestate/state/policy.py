"""Preserve policy for state-replacing actions.

When an action clears or overwrites a branch, the reducer definition may ask
for part of the previous branch to survive. The preserve setting decides how
much.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pyfirestate.exceptions import InvalidPreserveSettingError
from pyfirestate.state.tree import get_in, set_in

PreserveCallback = Callable[[Any, Any], Any]
PreserveSetting = bool | PreserveCallback | list[str] | tuple[str, ...] | set[str] | frozenset[str]

_MISSING = object()


def pick(state: Mapping[str, Any] | None, fields: Any) -> dict[str, Any]:
    """Return a new dict holding only *fields* of *state* that exist.

    A field that is a key of *state* is copied as is. Other string fields
    are read as dot-paths; nested values keep their nesting.
    """
    picked: dict[str, Any] = {}
    if not isinstance(state, Mapping):
        return picked
    for field in fields:
        if field in state:
            picked[field] = state[field]
        elif isinstance(field, str) and field:
            value = get_in(state, field, _MISSING)
            if value is not _MISSING:
                picked = set_in(picked, field, value)
    return picked


def preserve_values_from_state(
    state: Any,
    preserve_setting: PreserveSetting,
    next_state: Any = None,
) -> Any:
    """Combine the previous branch with the next one according to *preserve_setting*.

    - callable: ``preserve_setting(state, next_state)``
    - ``True``: *state* with *next_state* laid over it (or *state* alone)
    - collection of field names: only those fields of *state*

    Anything else, ``False`` included, raises
    :class:`~pyfirestate.exceptions.InvalidPreserveSettingError`.
    """
    if callable(preserve_setting):
        return preserve_setting(state, next_state)

    if preserve_setting is True:
        if next_state is None:
            return state
        return {**(state or {}), **next_state}

    if isinstance(preserve_setting, (list, tuple, set, frozenset)):
        return pick(state, preserve_setting)

    raise InvalidPreserveSettingError(
        "Invalid preserve parameter. It must be a function, True or a collection of field names.",
        setting=preserve_setting,
    )
