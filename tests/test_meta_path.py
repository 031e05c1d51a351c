from __future__ import annotations

import pytest

from pyfirestate.exceptions import FirestateError, MissingCollectionError, MissingMetaError
from pyfirestate.state.events import ActionMeta
from pyfirestate.state.meta import path_from_meta


def test_store_as_wins_over_collection() -> None:
    assert path_from_meta({"storeAs": "x", "collection": "ignored"}) == "x"
    assert path_from_meta(ActionMeta(store_as="x", collection="ignored")) == "x"


def test_store_as_ignores_subcollections() -> None:
    meta = {"storeAs": "recent", "collection": "c", "subcollections": [{}]}
    assert path_from_meta(meta) == "recent"


def test_collection_and_doc() -> None:
    assert path_from_meta({"collection": "c"}) == "c"
    assert path_from_meta({"collection": "c", "doc": "d"}) == "c.d"


def test_subcollections_are_appended_in_order() -> None:
    meta = {
        "collection": "c",
        "doc": "d",
        "subcollections": [{"collection": "s1"}, {"collection": "s2", "doc": "d2"}],
    }
    assert path_from_meta(meta) == "c.d.s1.s2.d2"


def test_nested_store_as_is_used_for_its_entry() -> None:
    meta = {"collection": "c", "subcollections": [{"storeAs": "alias"}, {"collection": "s"}]}
    assert path_from_meta(meta) == "c.alias.s"


def test_empty_subcollections_return_base_path() -> None:
    assert path_from_meta({"collection": "c", "doc": "d", "subcollections": []}) == "c.d"


def test_missing_meta() -> None:
    with pytest.raises(MissingMetaError):
        path_from_meta(None)


def test_missing_collection() -> None:
    with pytest.raises(MissingCollectionError):
        path_from_meta({})
    with pytest.raises(MissingCollectionError):
        path_from_meta({"collection": "", "storeAs": ""})


def test_malformed_subcollection_propagates() -> None:
    with pytest.raises(MissingCollectionError):
        path_from_meta({"collection": "c", "subcollections": [{"collection": "s"}, {"doc": "d"}]})
    with pytest.raises(MissingMetaError):
        path_from_meta({"collection": "c", "subcollections": [None]})


def test_errors_share_base_class() -> None:
    with pytest.raises(FirestateError):
        path_from_meta(None)
    with pytest.raises(ValueError):
        path_from_meta({})


def test_query_meta_is_ignored() -> None:
    meta = {"collection": "c", "where": [["a", "==", 1]], "orderBy": "a"}
    assert path_from_meta(meta) == "c"
