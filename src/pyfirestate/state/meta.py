"""Derive state tree paths from action meta."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyfirestate.exceptions import MissingCollectionError, MissingMetaError
from pyfirestate.state.events import ActionMeta


def path_from_meta(meta: ActionMeta | Mapping[str, Any] | None) -> str:
    """Build the dot-path an action's data is stored under.

    Parameters
    ----------
    meta : ActionMeta or mapping
        Action meta. Mappings are validated into :class:`ActionMeta`, so
        ``storeAs`` and ``store_as`` are both accepted.

    Returns
    -------
    str
        ``storeAs`` verbatim when set, otherwise ``collection[.doc]``
        followed by the paths of all subcollections, in order.

    Raises
    ------
    MissingMetaError
        ``meta`` (or one of its subcollections) is missing.
    MissingCollectionError
        Neither ``storeAs`` nor ``collection`` is set.
    """
    if meta is None:
        raise MissingMetaError("Action meta is required to build path for reducers.")
    if not isinstance(meta, ActionMeta):
        meta = ActionMeta.model_validate(meta)

    if meta.store_as:
        return meta.store_as
    if not meta.collection:
        raise MissingCollectionError("Collection is required to construct reducer path.")

    base_path = meta.collection
    if meta.doc:
        base_path = f"{base_path}.{meta.doc}"
    if not meta.subcollections:
        return base_path

    nested = ".".join(path_from_meta(sub) for sub in meta.subcollections)
    return f"{base_path}.{nested}"
