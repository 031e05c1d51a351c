"""Custom exception hierarchy for pyfirestate."""

from __future__ import annotations

from typing import Any


class FirestateError(Exception):
    """Base exception for all pyfirestate errors."""


class FirestateConfigError(FirestateError):
    """Invalid or missing configuration."""


class MissingMetaError(FirestateError, ValueError):
    """Action meta is required to build a reducer path."""


class MissingCollectionError(FirestateError, ValueError):
    """Meta has neither a collection nor a ``storeAs`` override."""


class InvalidPreserveSettingError(FirestateError, TypeError):
    """Preserve setting is not a callable, ``True`` or a collection of field names.

    The offending value is kept on :attr:`setting` so callers can report
    which reducer definition carried it.
    """

    def __init__(self, message: str, *, setting: Any = None) -> None:
        self.setting = setting
        super().__init__(message)
