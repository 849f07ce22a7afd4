# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from docpatch.errors import InvalidPath
from docpatch.paths import (
    APPEND, WILDCARD, Path, parse_pointer, parse_query, parse_path,
    canonicalize, escape_token, unescape_token, member_name,
)


def test_parse_pointer_root():
    assert parse_pointer("") == Path()
    assert parse_pointer("/") == Path()
    assert parse_pointer("").is_root


def test_parse_pointer_segments():
    assert list(parse_pointer("/a/0/-")) == ["a", 0, APPEND]
    assert list(parse_pointer("/books/12/title")) == ["books", 12, "title"]
    # Only canonical decimals are indices
    assert list(parse_pointer("/01")) == ["01"]
    assert list(parse_pointer("/-1")) == ["-1"]
    assert list(parse_pointer("/1e3")) == ["1e3"]
    # No wildcards in pointers
    assert list(parse_pointer("/*")) == ["*"]
    assert parse_pointer("/*").is_concrete


def test_parse_pointer_escapes():
    assert list(parse_pointer("/a~1b/m~0n")) == ["a/b", "m~n"]
    # ~1 is decoded before ~0
    assert list(parse_pointer("/~01")) == ["~1"]
    assert list(parse_pointer("/~10")) == ["/0"]
    assert list(parse_pointer("/a%20b")) == ["a b"]
    assert list(parse_pointer("/%7E1")) == ["~1"]
    assert list(parse_pointer("/caf%C3%A9")) == ["café"]
    # Escaped markers are plain keys
    assert list(parse_pointer("/%2D")) == ["-"]
    assert list(parse_pointer("/%31")) == [1]


@pytest.mark.parametrize("text", [
    "a/b",
    "/a//b",
    "/a/",
    "//",
    "/~2",
    "/a~",
    "/%zz",
    "/abc%",
    "/%ff",
])
def test_parse_pointer_invalid(text):
    with pytest.raises(InvalidPath) as excinfo:
        parse_pointer(text)
    assert excinfo.value.path == text


def test_parse_pointer_not_a_string():
    with pytest.raises(InvalidPath):
        parse_pointer(None)
    with pytest.raises(InvalidPath):
        parse_pointer(["a"])


def test_parse_query():
    assert parse_query("$") == Path(query=True)
    assert parse_query("$/") == Path(query=True)
    q = parse_query("$/a/*/b/-")
    assert list(q) == ["a", WILDCARD, "b", APPEND]
    assert q.query
    assert not q.is_concrete
    assert list(parse_query("$/%2A")) == ["*"]
    assert parse_query("$/a/0").is_concrete


@pytest.mark.parametrize("text", ["", "/a/*", "a", "$a", "$$/a", "$/a//*"])
def test_parse_query_invalid(text):
    with pytest.raises(InvalidPath):
        parse_query(text)


def test_parse_path_tells_forms_apart():
    assert parse_path("/a/*") == Path(["a", "*"])
    assert parse_path("$/a/*") == Path(["a", WILDCARD], query=True)
    p = Path(["x"])
    assert parse_path(p) is p


def test_path_properties():
    p = parse_pointer("/a/0/b")
    assert len(p) == 3
    assert p[0] == "a"
    assert p.last == "b"
    assert p.parent == parse_pointer("/a/0")
    assert p.parent.parent.parent.is_root
    assert p.child(APPEND) == parse_pointer("/a/0/b/-")
    assert p.startswith(parse_pointer("/a"))
    assert p.startswith(p)
    assert not p.startswith(parse_pointer("/a/1"))
    assert not parse_pointer("/a").startswith(p)
    assert p[1:] == parse_pointer("/0/b")
    with pytest.raises(InvalidPath):
        Path().parent


def test_path_hash_and_copy():
    paths = {parse_pointer("/a/0"), parse_pointer("/a/0"), parse_query("$/a/0")}
    assert len(paths) == 2
    q = parse_query("$/a/*/-")
    assert copy.deepcopy(q) == q
    assert copy.deepcopy(q)[1] is WILDCARD


def test_path_str():
    assert str(parse_pointer("/a~1b/0/-")) == "/a~1b/0/-"
    assert str(parse_query("$/a/*")) == "$/a/*"
    assert str(parse_query("$")) == "$"
    assert repr(parse_pointer("/x")) == "Path('/x')"


@pytest.mark.parametrize("segments, text", [
    ([], ""),
    (["a", 0, APPEND], "/a/0/-"),
    (["a/b", "m~n"], "/a~1b/m~0n"),
    (["%", "50%"], "/%25/50%25"),
    (["-", "*"], "/%2D/%2A"),
    (["~1", "01"], "/~01/01"),
])
def test_canonicalize_round_trip(segments, text):
    p = Path(segments)
    assert canonicalize(p) == text
    assert parse_pointer(text) == p


def test_canonicalize_of_strings_and_concrete_queries():
    assert canonicalize("/a/%62") == "/a/b"
    assert canonicalize("$/a/0") == "/a/0"


def test_canonicalize_rejects_unwritable_paths():
    with pytest.raises(InvalidPath):
        canonicalize(parse_query("$/a/*"))
    with pytest.raises(InvalidPath):
        canonicalize(Path(["a", ""]))


def test_token_helpers():
    assert escape_token("a/b~c") == "a~1b~0c"
    assert unescape_token("a~1b~0c") == "a/b~c"
    assert member_name("a") == "a"
    assert member_name(3) == "3"
    assert member_name(APPEND) == "-"
    with pytest.raises(InvalidPath):
        member_name(WILDCARD)
