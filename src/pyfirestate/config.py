"""Store configuration for pyfirestate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyfirestate.exceptions import FirestateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise FirestateConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """State store configuration.

    Parameters
    ----------
    log_actions : bool
        Emit a DEBUG log line for every dispatched action, including the
        tree path derived from its meta.
    copy_on_read : bool
        Return deep copies from :meth:`StateStore.get_state` and
        :meth:`StateStore.get` so callers cannot mutate the stored snapshot.
    max_log_string : int
        Strings longer than this are truncated in logged payloads.
    """

    log_actions: bool = False
    copy_on_read: bool = True
    max_log_string: int = 512

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from ``PYFIRESTATE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "log_actions" not in overrides:
            config_kwargs["log_actions"] = _env_bool(env.get("PYFIRESTATE_LOG_ACTIONS"), False)

        if "copy_on_read" not in overrides:
            config_kwargs["copy_on_read"] = _env_bool(env.get("PYFIRESTATE_COPY_ON_READ"), True)

        max_string_env = env.get("PYFIRESTATE_MAX_LOG_STRING")
        if max_string_env is not None and "max_log_string" not in overrides:
            config_kwargs["max_log_string"] = _env_int("PYFIRESTATE_MAX_LOG_STRING", max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
