# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from . import log
from . import pointer
from .comparing import deep_equals
from .errors import PatchError, InvalidPath, TargetNotFound, TestFailed
from .patch_format import PatchOp, PatchEntry, validate_patch_entry
from .paths import parse_path
from .query import query_paths
from .values import deep_copy


__all__ = ["apply_operation", "apply_patches", "expand_path"]


def expand_path(path, doc):
    """Resolve a pointer or query string to a list of concrete paths.

    A pointer always gives exactly one path. A query gives one path
    per match in the current state of doc, possibly none.
    """
    parsed = parse_path(path)
    if not parsed.query:
        return [parsed]
    return query_paths(parsed, doc)


def _require_existing(doc, path, what="target"):
    if not pointer.exists(doc, path):
        raise TargetNotFound("%s does not exist" % what, path=path)


def patch_add(doc, e):
    for target in expand_path(e.path, doc):
        pointer.add(doc, target, deep_copy(e.value))


def patch_remove(doc, e):
    for target in expand_path(e.path, doc):
        _require_existing(doc, target)
        pointer.remove(doc, target)


def patch_replace(doc, e):
    for target in expand_path(e.path, doc):
        pointer.replace(doc, target, deep_copy(e.value))


def _transfer(doc, e, remove_source):
    # Both ends are expanded against the document as it was before
    # the operation. Every source is added at every target.
    sources = expand_path(e.from_, doc)
    targets = expand_path(e.path, doc)
    for source in sources:
        _require_existing(doc, source, what="source")
        for target in targets:
            if remove_source and target != source and target.startswith(source):
                raise InvalidPath(
                    "cannot move a value into one of its own children", path=target)
        if remove_source:
            value = pointer.remove(doc, source)
        else:
            value = pointer.get(doc, source)
        for target in targets:
            pointer.add(doc, target, deep_copy(value))


def patch_move(doc, e):
    _transfer(doc, e, remove_source=True)


def patch_copy(doc, e):
    _transfer(doc, e, remove_source=False)


def patch_test(doc, e):
    for target in expand_path(e.path, doc):
        _require_existing(doc, target)
        actual = pointer.get(doc, target)
        if not deep_equals(actual, e.value):
            raise TestFailed(
                "test failed: expected %r, found %r" % (e.value, actual),
                path=target, expected=e.value, actual=actual)


_handlers = {
    PatchOp.ADD: patch_add,
    PatchOp.REMOVE: patch_remove,
    PatchOp.REPLACE: patch_replace,
    PatchOp.MOVE: patch_move,
    PatchOp.COPY: patch_copy,
    PatchOp.TEST: patch_test,
}


def apply_operation_in_place(doc, operation):
    """Apply a single patch operation to doc, mutating it.

    On failure doc keeps whatever changes the operation made
    before the failing step.
    """
    validate_patch_entry(operation)
    e = PatchEntry(operation)
    log.debug("applying %s", log.describe_operation(e))
    try:
        _handlers[e.op](doc, e)
    except PatchError as err:
        if err.op is None:
            err.op = e.op
        raise
    return doc


def apply_operation(doc, operation):
    """Produce a patched copy of doc with a single patch operation.

    The operation is a mapping with an 'op' field, one of add, remove,
    replace, move, copy or test, a 'path' field, and a 'from' or
    'value' field depending on the op. Paths are pointers ('/a/0')
    or queries ('$/a/*') that may match several locations.
    """
    return apply_operation_in_place(deep_copy(doc), operation)


def apply_patches(doc, operations, in_place=False):
    """Produce a patched version of doc with a list of patch operations.

    The operations are applied in order, each one seeing the result
    of the previous ones. The first failing operation raises a
    PatchError subclass; operations applied before it are not undone.

    operations may be any iterable of operations.
    doc is deep copied first unless in_place is true. An empty list
    of operations returns doc as is, and if either argument is None,
    None is returned.
    """
    if doc is None or operations is None:
        return None
    operations = list(operations)
    if not operations:
        return doc
    if not in_place:
        doc = deep_copy(doc)
    log.debug("applying %d patch operations", len(operations))
    for operation in operations:
        apply_operation_in_place(doc, operation)
    return doc
