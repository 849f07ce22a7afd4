# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Parsing and formatting of pointer and query paths.

A pointer addresses a single location: "" is the document root, and
"/foo/0/bar" steps into member "foo", element 0, member "bar".
A query is anchored at "$" and may use "*" as a segment matching every
member or element of the container reached so far: "$/foo/*/bar".

Paths are parsed into a `Path`, a sequence of segments:

- str: an object member name (after decoding escapes)
- int: an array index
- APPEND: the "-" token, the position after the last array element
- WILDCARD: the "*" token, only in queries
"""

import re
from urllib.parse import unquote

from .errors import InvalidPath
from .values import type_name


__all__ = [
    "APPEND", "WILDCARD", "Path",
    "parse_pointer", "parse_query", "parse_path", "as_pointer",
    "canonicalize", "escape_token", "unescape_token",
    "segment_for_name", "member_name",
]


class _Marker(object):
    "Singleton segment types that are not plain keys or indices."

    def __init__(self, token, name):
        self.token = token
        self.name = name

    def __repr__(self):
        return self.name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


APPEND = _Marker("-", "APPEND")
WILDCARD = _Marker("*", "WILDCARD")


# Array indices are written without sign or leading zeros
_r_index = re.compile(r"^(0|[1-9][0-9]*)$")
_r_bad_tilde = re.compile(r"~(?![01])")
_r_bad_percent = re.compile(r"%(?![0-9A-Fa-f]{2})")


def unescape_token(token, path=None):
    """Decode a single raw path segment.

    "~1" becomes "/" and "~0" becomes "~", in that order, and the result
    is then percent-decoded.
    """
    if _r_bad_tilde.search(token):
        raise InvalidPath("malformed '~' escape in segment %r" % token, path=path)
    if _r_bad_percent.search(token):
        raise InvalidPath("malformed '%%' escape in segment %r" % token, path=path)
    token = token.replace("~1", "/").replace("~0", "~")
    try:
        return unquote(token, errors="strict")
    except UnicodeDecodeError:
        raise InvalidPath("percent escapes in segment %r are not valid utf-8" % token,
                          path=path)


def escape_token(name):
    "Encode a member name so that it parses back to the same name."
    token = name.replace("%", "%25").replace("~", "~0").replace("/", "~1")
    if token == APPEND.token:
        return "%2D"
    elif token == WILDCARD.token:
        return "%2A"
    return token


def segment_for_name(name):
    "The segment addressing the member or element called name."
    if _r_index.match(name):
        return int(name)
    return name


def member_name(segment):
    "The object member name a concrete segment addresses."
    if isinstance(segment, str):
        return segment
    elif segment is APPEND:
        return APPEND.token
    elif segment is WILDCARD:
        raise InvalidPath("a wildcard does not name a single member")
    return str(segment)


def _format_segment(segment):
    if isinstance(segment, str):
        return escape_token(segment)
    elif isinstance(segment, _Marker):
        return segment.token
    return str(segment)


class Path(object):
    """Immutable sequence of path segments.

    The query flag records whether the path was written in query form.
    Only query paths may hold wildcards.
    """

    __slots__ = ("segments", "query")

    def __init__(self, segments=(), query=False):
        self.segments = tuple(segments)
        self.query = bool(query)

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return Path(self.segments[item], self.query)
        return self.segments[item]

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self.query == other.query and self.segments == other.segments

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.query, self.segments))

    def __repr__(self):
        return "Path(%r)" % str(self)

    def __str__(self):
        text = "".join("/" + _format_segment(s) for s in self.segments)
        return "$" + text if self.query else text

    @property
    def is_root(self):
        return not self.segments

    @property
    def is_concrete(self):
        return not any(s is WILDCARD for s in self.segments)

    @property
    def parent(self):
        if not self.segments:
            raise InvalidPath("the document root has no parent")
        return Path(self.segments[:-1], self.query)

    @property
    def last(self):
        return self.segments[-1] if self.segments else None

    def child(self, segment):
        return Path(self.segments + (segment,), self.query)

    def startswith(self, other):
        "Whether other is a prefix of this path (or equal to it)."
        n = len(other.segments)
        return n <= len(self.segments) and self.segments[:n] == other.segments

    def as_pointer(self):
        "The same segments in pointer form."
        if not self.is_concrete:
            raise InvalidPath("a path with wildcards is not a pointer", path=str(self))
        return Path(self.segments)


def _parse_segments(text, query, source):
    segments = []
    for raw in text.split("/"):
        if not raw:
            raise InvalidPath("empty segment in path", path=source)
        if raw == APPEND.token:
            segments.append(APPEND)
        elif query and raw == WILDCARD.token:
            segments.append(WILDCARD)
        else:
            segments.append(segment_for_name(unescape_token(raw, path=source)))
    return segments


def parse_pointer(text):
    "Parse a pointer string like '/foo/0' into a Path."
    if not isinstance(text, str):
        raise InvalidPath("a path must be a string, not %s" % type_name(text))
    if text in ("", "/"):
        return Path()
    if not text.startswith("/"):
        raise InvalidPath("a pointer must be empty or start with '/'", path=text)
    return Path(_parse_segments(text[1:], False, text))


def parse_query(text):
    "Parse a query string like '$/foo/*/bar' into a Path."
    if not isinstance(text, str):
        raise InvalidPath("a query must be a string, not %s" % type_name(text))
    if not text.startswith("$"):
        raise InvalidPath("a query must start with '$'", path=text)
    rest = text[1:]
    if rest in ("", "/"):
        return Path(query=True)
    if not rest.startswith("/"):
        raise InvalidPath("query segments must follow '$/'", path=text)
    return Path(_parse_segments(rest[1:], True, text), query=True)


def parse_path(path):
    "Parse a pointer or a query, telling them apart by the '$' anchor."
    if isinstance(path, Path):
        return path
    if isinstance(path, str) and path.startswith("$"):
        return parse_query(path)
    return parse_pointer(path)


def as_pointer(path):
    "Coerce a pointer string or concrete Path to a pointer-form Path."
    if isinstance(path, Path):
        return path.as_pointer()
    return parse_pointer(path)


def canonicalize(path):
    """Write a concrete path as a pointer string.

    This is the form produced by query evaluation and accepted by
    the pointer functions, so parse_pointer(canonicalize(p)) == p.
    """
    path = parse_path(path).as_pointer()
    if "" in path.segments:
        raise InvalidPath("empty member names cannot be written as a pointer")
    return str(path)
