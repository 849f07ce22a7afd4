# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Expand query paths into the concrete pointers they match.

Results come out depth-first and left to right: object members in
their stored order, array elements by ascending index. Bulk patch
operations rely on this order.
"""

from .paths import WILDCARD, Path, canonicalize, parse_path, segment_for_name
from .pointer import step, exists, get
from .values import Missing, as_object, as_array


__all__ = ["query_paths", "query_pointers", "query_values"]


def _children(obj):
    "Segments of every member or element of obj, empty for leaf values."
    members = as_object(obj)
    if members is not Missing:
        return [segment_for_name(key) for key in members]
    elements = as_array(obj)
    if elements is not Missing:
        return list(range(len(elements)))
    return []


def _expand(obj, segments, prefix, source):
    if not segments:
        yield prefix
        return
    segment, rest = segments[0], segments[1:]
    if segment is WILDCARD:
        for child in _children(obj):
            # Walk via step so numeric member names resolve like parsed ones
            value = step(obj, child, source)
            for match in _expand(value, rest, prefix + (child,), source):
                yield match
    elif not rest:
        # The last segment may name a location yet to be created
        yield prefix + (segment,)
    else:
        value = step(obj, segment, source)
        for match in _expand(value, rest, prefix + (segment,), source):
            yield match


def query_paths(query, doc):
    """Return the list of concrete pointer paths matched by query in doc.

    query may be a Path or a string. Without wildcards the single
    result is the path itself, whether or not a value exists there.
    """
    path = parse_path(query)
    return [Path(segments) for segments in _expand(doc, path.segments, (), path)]


def query_pointers(query, doc):
    """Like query_paths, with each match written as a pointer string.

    A match under an empty member name has no pointer form and
    raises InvalidPath.
    """
    return [canonicalize(p) for p in query_paths(query, doc)]


def query_values(query, doc):
    "Return (pointer, value) pairs for every match that holds a value."
    return [(canonicalize(p), get(doc, p)) for p in query_paths(query, doc) if exists(doc, p)]
