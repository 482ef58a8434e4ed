import pytest

from jsonapi_view.include import (
    EMPTY_SCOPE, parse_include, parse_include_parameter, include_paths
)


def test_nested_paths():
    scope = parse_include(["author.posts", "comments"])
    assert scope == {"author": {"posts": {}}, "comments": {}}


def test_overlapping_paths_are_merged():
    scope = parse_include(["author", "author.posts", "author.mentor"])
    assert scope == {"author": {"posts": {}, "mentor": {}}}

    scope = parse_include(["author.posts", "author"])
    assert scope == {"author": {"posts": {}}}


def test_empty_path():
    assert parse_include([""]) == {}
    assert parse_include([]) == {}
    assert parse_include([""]) is EMPTY_SCOPE


def test_empty_segments_are_ignored():
    assert parse_include(["author..posts"]) == {"author": {"posts": {}}}
    assert parse_include([".comments."]) == {"comments": {}}
    assert parse_include(["..."]) == {}


def test_scope_is_read_only():
    scope = parse_include(["author.posts"])
    with pytest.raises(TypeError):
        scope["comments"] = {}
    with pytest.raises(TypeError):
        scope["author"]["comments"] = {}


def test_order_of_first_occurrence():
    scope = parse_include(["comments", "author.posts", "author"])
    assert list(scope.keys()) == ["comments", "author"]


@pytest.mark.parametrize("value, expected", [
    (None, {}),
    ("", {}),
    ("author.posts,comments", {"author": {"posts": {}}, "comments": {}}),
    (" author , comments.author ", {"author": {}, "comments": {"author": {}}}),
    ("author,,", {"author": {}}),
])
def test_parse_include_parameter(value, expected):
    assert parse_include_parameter(value) == expected


def test_include_paths():
    scope = parse_include(["author.posts", "author.mentor", "comments"])
    assert include_paths(scope) == [
        "author.posts", "author.mentor", "comments"
    ]
    assert include_paths(EMPTY_SCOPE) == []
    assert include_paths(None) == []
