# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Accessors for json-like values.

Documents are plain python values: dicts with string keys, lists,
strings, numbers, booleans and None. The accessors in this module are
total: on a type mismatch or a missing entry they return the
`Missing` sentinel instead of raising.
"""

import copy


__all__ = [
    "Missing", "deep_copy", "is_object", "is_array", "is_container",
    "as_object", "as_array", "get_key", "get_index", "type_name",
]


class _MissingType(object):
    "Sentinel type to allow None as a value."

    def __repr__(self):
        return "Missing"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


# Sentinel to allow None as a value
Missing = _MissingType()


def deep_copy(value):
    "Structural copy of a json-like value, sharing no containers with the input."
    return copy.deepcopy(value)


def is_object(value):
    return isinstance(value, dict)


def is_array(value):
    return isinstance(value, list)


def is_container(value):
    return isinstance(value, (dict, list))


def as_object(value):
    return value if isinstance(value, dict) else Missing


def as_array(value):
    return value if isinstance(value, list) else Missing


def get_key(value, key):
    "Return the member named key of an object, or Missing."
    if not isinstance(value, dict):
        return Missing
    return value.get(key, Missing)


def get_index(value, index):
    "Return the element at a non-negative index of an array, or Missing."
    if not isinstance(value, list):
        return Missing
    if not isinstance(index, int) or isinstance(index, bool):
        return Missing
    if 0 <= index < len(value):
        return value[index]
    return Missing


def type_name(value):
    "Name of the json type of value, for messages."
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    return type(value).__name__
