# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = ["deep_equals", "equals_unordered", "subtract", "intersect"]


def _is_number(x):
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def deep_equals(a, b):
    """Compare two json-like values structurally.

    Unlike ==, booleans never equal numbers, while ints and floats
    compare by numeric value. Object member order is ignored,
    array element order is not.
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not deep_equals(value, b[key]):
                return False
        return True
    elif isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(deep_equals(x, y) for x, y in zip(a, b))
    elif _is_number(a):
        return _is_number(b) and a == b
    elif isinstance(a, bool):
        return isinstance(b, bool) and a == b
    elif a is None:
        return b is None
    return type(a) == type(b) and a == b


def _index_of(items, value, compare):
    for i, item in enumerate(items):
        if compare(item, value):
            return i
    return -1


def subtract(a, b, compare=deep_equals):
    """Items of a not matched by an item of b, in order of a.

    Each item of b cancels at most one item of a.
    """
    remaining = list(b)
    result = []
    for item in a:
        i = _index_of(remaining, item, compare)
        if i < 0:
            result.append(item)
        else:
            del remaining[i]
    return result


def intersect(a, b, compare=deep_equals):
    "Items of a matched by a distinct item of b, in order of a."
    remaining = list(b)
    result = []
    for item in a:
        i = _index_of(remaining, item, compare)
        if i >= 0:
            result.append(item)
            del remaining[i]
    return result


def equals_unordered(a, b, compare=deep_equals):
    "Whether sequences a and b hold the same items, counting duplicates."
    if len(a) != len(b):
        return False
    return not subtract(a, b, compare)
