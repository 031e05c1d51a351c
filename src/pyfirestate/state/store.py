"""Deterministic in-memory state store.

Drives a root reducer with actions and keeps the latest snapshot. Every
dispatch replaces the snapshot; previous snapshots are never mutated.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pyfirestate._redact import redact_for_log
from pyfirestate.config import StoreConfig
from pyfirestate.exceptions import FirestateError
from pyfirestate.state.events import Action, ActionMeta, StoreActionType
from pyfirestate.state.meta import path_from_meta
from pyfirestate.state.tree import TreePath, get_in

_logger = logging.getLogger(__name__)

RootReducer = Callable[[Any, Action], Any]
Listener = Callable[[Any, Action], None]


class StateStore:
    """In-memory store holding the latest state tree.

    Given the same initial state and sequence of actions, the store produces
    the same snapshots.
    """

    def __init__(
        self,
        reducer: RootReducer,
        *,
        initial_state: Any = None,
        config: StoreConfig | None = None,
    ) -> None:
        self._reducer = reducer
        self._config = config or StoreConfig()
        self._listeners: list[Listener] = []
        self._state = reducer(initial_state, Action(type=StoreActionType.INIT.value))

    @property
    def config(self) -> StoreConfig:
        return self._config

    def _read(self, value: Any) -> Any:
        return copy.deepcopy(value) if self._config.copy_on_read else value

    def _log_action(self, action: Action) -> None:
        path: str | None = None
        if action.meta is not None:
            try:
                path = path_from_meta(action.meta)
            except FirestateError:
                # The reducer decides whether a missing path is fatal.
                path = None
        _logger.debug(
            "Dispatching action type=%s path=%s payload=%s",
            action.type,
            path,
            redact_for_log(action.payload, max_string=self._config.max_log_string),
        )

    def dispatch(self, action: Action | Mapping[str, Any]) -> Any:
        """Run *action* through the root reducer and return the new snapshot.

        Reducer errors propagate and leave the current snapshot in place.
        """
        if not isinstance(action, Action):
            action = Action.model_validate(action)
        if self._config.log_actions:
            self._log_action(action)

        self._state = self._reducer(self._state, action)

        for listener in tuple(self._listeners):
            try:
                listener(self._read(self._state), action)
            except Exception:
                _logger.debug("State listener failed for action type=%s", action.type, exc_info=True)
        return self._read(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with the new snapshot after every dispatch.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_state(self) -> Any:
        return self._read(self._state)

    def get(self, path: TreePath, default: Any = None) -> Any:
        """Get the value at a dot-path of the current snapshot."""
        return self._read(get_in(self._state, path, default))

    def get_for_meta(self, meta: ActionMeta | Mapping[str, Any], default: Any = None) -> Any:
        """Get the branch an action with *meta* would write to."""
        return self.get(path_from_meta(meta), default)
