"""pyfirestate - Path and immutable-update helpers for a normalized document cache."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfirestate")
except PackageNotFoundError:
    __version__ = "0+local"
from pyfirestate.config import StoreConfig
from pyfirestate.exceptions import (
    FirestateConfigError,
    FirestateError,
    InvalidPreserveSettingError,
    MissingCollectionError,
    MissingMetaError,
)
from pyfirestate.state.combine import combine_reducers
from pyfirestate.state.events import Action, ActionMeta, StoreActionType
from pyfirestate.state.merge import update_item_in_array, update_object
from pyfirestate.state.meta import path_from_meta
from pyfirestate.state.paths import dot_path, path_to_segments, slash_path
from pyfirestate.state.policy import pick, preserve_values_from_state
from pyfirestate.state.store import StateStore
from pyfirestate.state.tree import get_in, set_in, unset_in

__all__ = [
    "__version__",
    "Action",
    "ActionMeta",
    "FirestateConfigError",
    "FirestateError",
    "InvalidPreserveSettingError",
    "MissingCollectionError",
    "MissingMetaError",
    "StateStore",
    "StoreActionType",
    "StoreConfig",
    "combine_reducers",
    "dot_path",
    "get_in",
    "path_from_meta",
    "path_to_segments",
    "pick",
    "preserve_values_from_state",
    "set_in",
    "slash_path",
    "unset_in",
    "update_item_in_array",
    "update_object",
]
