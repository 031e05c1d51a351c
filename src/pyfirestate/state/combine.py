"""Reducer composition."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

Reducer = Callable[[Any, Any], Any]


def combine_reducers(
    reducers: Mapping[str, Reducer] | Iterable[tuple[str, Reducer]],
) -> Callable[..., dict[str, Any]]:
    """Turn named sub-reducers into one reducer over a dict of sub-states.

    The combined reducer always builds a new dict whose keys are exactly the
    reducer keys, in declaration order. Keys of the incoming state without a
    reducer are dropped.
    """
    pairs: tuple[tuple[str, Reducer], ...] = tuple(
        reducers.items() if isinstance(reducers, Mapping) else reducers
    )

    def combination(state: Mapping[str, Any] | None = None, action: Any = None) -> dict[str, Any]:
        previous = state or {}
        next_state: dict[str, Any] = {}
        for key, reducer in pairs:
            next_state[key] = reducer(previous.get(key), action)
        return next_state

    return combination
