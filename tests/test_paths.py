from __future__ import annotations

from pyfirestate.state.paths import dot_path, path_to_segments, slash_path


def test_path_to_segments_drops_empty_segments() -> None:
    assert path_to_segments("/a//b/") == ["a", "b"]
    assert "" not in path_to_segments("//projects///123//")


def test_path_to_segments_empty_input() -> None:
    assert path_to_segments("") == []
    assert path_to_segments(None) == []
    assert path_to_segments("///") == []


def test_slash_and_dot_paths() -> None:
    assert slash_path("/projects/123/") == "projects/123"
    assert dot_path("/projects/123/tasks") == "projects.123.tasks"


def test_normalized_paths_are_stable() -> None:
    assert slash_path(slash_path("//a/b//c")) == slash_path("//a/b//c")
    assert dot_path("a") == "a"
