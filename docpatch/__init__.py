# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .comparing import deep_equals
from .errors import (
    PatchError, InvalidPath, MissingRequiredField, UnsupportedOperation,
    TargetNotFound, InvalidPathSegment, IndexOutOfBounds, InvalidIndex, TestFailed,
)
from .paths import Path, parse_pointer, parse_query, parse_path, canonicalize
from .pointer import get, exists, add, replace, remove
from .query import query_paths, query_pointers
from .patching import apply_operation, apply_patches


__all__ = [
    "__version__",
    "apply_operation", "apply_patches",
    "Path", "parse_pointer", "parse_query", "parse_path", "canonicalize",
    "get", "exists", "add", "replace", "remove",
    "query_paths", "query_pointers",
    "deep_equals",
    "PatchError", "InvalidPath", "MissingRequiredField", "UnsupportedOperation",
    "TargetNotFound", "InvalidPathSegment", "IndexOutOfBounds", "InvalidIndex",
    "TestFailed",
    ]
