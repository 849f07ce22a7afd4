# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Exceptions raised while parsing paths and applying patches.

Every failure kind is its own class, so callers can tell them apart
with ``except`` clauses. All of them carry the offending pointer text
in ``path`` and, once they have passed through the patch interpreter,
the name of the failing operation in ``op``.
"""

__all__ = [
    "PatchError",
    "InvalidPath",
    "MissingRequiredField",
    "UnsupportedOperation",
    "TargetNotFound",
    "InvalidPathSegment",
    "IndexOutOfBounds",
    "InvalidIndex",
    "TestFailed",
]


class PatchError(ValueError):
    """Base class for all docpatch errors."""

    def __init__(self, message, path=None, op=None):
        super(PatchError, self).__init__(message)
        self.message = message
        self.path = path if path is None or isinstance(path, str) else str(path)
        self.op = op

    def __str__(self):
        context = []
        if self.op is not None:
            context.append("op=%r" % self.op)
        if self.path is not None:
            context.append("path=%r" % str(self.path))
        if context:
            return "%s (%s)" % (self.message, ", ".join(context))
        return self.message


class InvalidPath(PatchError):
    pass


class MissingRequiredField(PatchError):

    def __init__(self, field, path=None, op=None):
        super(MissingRequiredField, self).__init__(
            "missing required field %r" % field, path=path, op=op)
        self.field = field


class UnsupportedOperation(PatchError):
    pass


class TargetNotFound(PatchError):
    pass


class InvalidPathSegment(PatchError):
    pass


class IndexOutOfBounds(PatchError):
    pass


class InvalidIndex(PatchError):
    pass


class TestFailed(PatchError, AssertionError):
    """A test operation found a value different from the expected one."""

    # Keep pytest from collecting this as a test class
    __test__ = False

    def __init__(self, message, path=None, op=None, expected=None, actual=None):
        super(TestFailed, self).__init__(message, path=path, op=op)
        self.expected = expected
        self.actual = actual
