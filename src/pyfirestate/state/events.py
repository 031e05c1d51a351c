"""Normalized actions.

Every action handed to a reducer is one of these models. Host code may
dispatch plain mappings; :class:`pyfirestate.state.store.StateStore`
validates them into :class:`Action` first.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class StoreActionType(StrEnum):
    INIT = "@@pyfirestate/INIT"


class ActionMeta(BaseModel):
    """Where an action's data lives in the state tree.

    Keys arrive camelCased (``storeAs``) from action creators; snake_case
    field names are accepted too. Query metadata such as ``where`` or
    ``orderBy`` is ignored here.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    collection: str | None = None
    doc: str | None = None
    subcollections: tuple[ActionMeta | None, ...] | None = None
    store_as: str | None = Field(
        default=None,
        description="Explicit tree key overriding the collection/doc path.",
    )


class Action(BaseModel):
    """A change to apply to the state tree."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Action type")
    payload: Any = None
    meta: ActionMeta | None = None

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        action_type = value.strip()
        if not action_type:
            raise ValueError("type must be non-empty")
        return action_type
