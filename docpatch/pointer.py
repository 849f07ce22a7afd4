# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Get and set values in a document at a single pointer location.

The mutating functions change the document in place. The document
root itself cannot be mutated this way, as there is no container to
put a new root into.
"""

from .errors import (
    InvalidPath, TargetNotFound, InvalidPathSegment, IndexOutOfBounds, InvalidIndex)
from .paths import APPEND, as_pointer, member_name
from .values import Missing, type_name, is_object, is_array, is_container, get_key, get_index


__all__ = ["get", "exists", "add", "replace", "remove", "resolve_parent"]


def step(obj, segment, path):
    """Take a single step from obj into the child addressed by segment.

    path is the full pointer being resolved, used in error messages.
    """
    if not is_container(obj):
        raise InvalidPathSegment(
            "cannot step into %s with segment %r" % (type_name(obj), segment), path=path)
    if is_object(obj):
        key = member_name(segment)
        value = get_key(obj, key)
        if value is Missing:
            raise TargetNotFound("no member %r in object" % key, path=path)
        return value
    if isinstance(segment, str):
        raise InvalidPathSegment(
            "member name %r used on an array" % segment, path=path)
    if segment is APPEND:
        raise TargetNotFound("'-' refers to a nonexistent array element", path=path)
    value = get_index(obj, segment)
    if value is Missing:
        raise TargetNotFound(
            "index %d out of range for array of length %d" % (segment, len(obj)),
            path=path)
    return value


def get(doc, path):
    "Return the value at path."
    path = as_pointer(path)
    obj = doc
    for segment in path:
        obj = step(obj, segment, path)
    return obj


def exists(doc, path):
    "Whether a value exists at path."
    try:
        get(doc, path)
    except (TargetNotFound, InvalidPathSegment):
        return False
    return True


def resolve_parent(doc, path):
    """Return the container holding the target of path.

    A missing or null parent raises TargetNotFound.
    """
    path = as_pointer(path)
    if path.is_root:
        raise InvalidPath("the document root cannot be modified in place", path=path)
    parent = get(doc, path.parent)
    if parent is None:
        raise TargetNotFound("parent of target is null", path=path)
    return parent


def _insert_index(parent, segment, path):
    if segment is APPEND:
        return len(parent)
    if isinstance(segment, str):
        raise InvalidIndex("array index must be a number or '-', not %r" % segment, path=path)
    if segment > len(parent):
        raise IndexOutOfBounds(
            "cannot insert at index %d into array of length %d" % (segment, len(parent)),
            path=path)
    return segment


def add(doc, path, value):
    """Insert value at path.

    In an array the value is inserted before the addressed index
    (shifting later elements right), or appended for '-'.
    In an object the member is added or overwritten.
    """
    path = as_pointer(path)
    parent = resolve_parent(doc, path)
    segment = path.last
    if is_array(parent):
        parent.insert(_insert_index(parent, segment, path), value)
    elif is_object(parent):
        parent[member_name(segment)] = value
    else:
        raise InvalidPathSegment(
            "cannot add a value inside a %s" % type_name(parent), path=path)


def _existing_parent(doc, path, action):
    if path.is_root:
        raise InvalidPath("the document root cannot be modified in place", path=path)
    if not exists(doc, path):
        raise TargetNotFound("no value to %s" % action, path=path)
    return get(doc, path.parent)


def replace(doc, path, value):
    "Replace the existing value at path, returning the old value."
    path = as_pointer(path)
    parent = _existing_parent(doc, path, "replace")
    segment = path.last
    if is_array(parent):
        old, parent[segment] = parent[segment], value
    else:
        key = member_name(segment)
        old, parent[key] = parent[key], value
    return old


def remove(doc, path):
    "Remove the existing value at path, returning it."
    path = as_pointer(path)
    parent = _existing_parent(doc, path, "remove")
    segment = path.last
    if is_array(parent):
        return parent.pop(segment)
    return parent.pop(member_name(segment))
