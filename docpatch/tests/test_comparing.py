# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from docpatch.comparing import deep_equals, equals_unordered, subtract, intersect


def test_deep_equals_scalars():
    assert deep_equals(1, 1)
    assert deep_equals(1, 1.0)
    assert deep_equals("a", "a")
    assert deep_equals(None, None)
    assert deep_equals(False, False)
    assert not deep_equals(1, "1")
    assert not deep_equals(True, 1)
    assert not deep_equals(0, False)
    assert not deep_equals(None, False)
    assert not deep_equals(None, 0)


def test_deep_equals_containers():
    assert deep_equals({"a": [1, {"b": None}]}, {"a": [1.0, {"b": None}]})
    # Member order does not matter, element order does
    assert deep_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert not deep_equals([1, 2], [2, 1])
    assert not deep_equals({"a": 1}, {"a": 1, "b": 2})
    assert not deep_equals({"a": 1}, {"b": 1})
    assert not deep_equals([1], [1, 1])
    assert not deep_equals([], {})
    assert not deep_equals({"a": [True]}, {"a": [1]})


def test_subtract():
    assert subtract([1, 2, 3, 2], [2]) == [1, 3, 2]
    assert subtract([{"a": 1}, {"a": 2}], [{"a": 1.0}]) == [{"a": 2}]
    assert subtract([1, True], [True]) == [1]
    assert subtract([], [1]) == []


def test_intersect():
    assert intersect([1, 2, 2, 3], [2, 3, 4]) == [2, 3]
    assert intersect([1, 2, 2], [2, 2]) == [2, 2]
    assert intersect([[1], [2]], [[2]]) == [[2]]


def test_equals_unordered():
    assert equals_unordered([1, 2, 2], [2, 1, 2])
    assert equals_unordered([{"a": 1}, "x"], ["x", {"a": 1}])
    assert not equals_unordered([1, 2, 2], [1, 1, 2])
    assert not equals_unordered([1], [1, 1])
    assert equals_unordered([], [])
