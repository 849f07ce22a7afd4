# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import PatchError, InvalidPath, MissingRequiredField, UnsupportedOperation
from .values import Missing


class PatchEntry(dict):
    """For internal usage in docpatch library.

    Minimal class providing attribute access to patch operation keys.
    Since 'from' is a python keyword, it is also reachable as 'from_'.
    Absent optional fields read as Missing, so a null value stays
    distinguishable from no value at all.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        return self.get(name, Missing)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Fields each operation needs besides 'op'
REQUIRED_FIELDS = {
    PatchOp.ADD: ("path", "value"),
    PatchOp.REMOVE: ("path",),
    PatchOp.REPLACE: ("path", "value"),
    PatchOp.MOVE: ("from", "path"),
    PatchOp.COPY: ("from", "path"),
    PatchOp.TEST: ("path", "value"),
}

PATH_FIELDS = ("from", "path")


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_, path):
    "Create a patch entry to move the value at from_ to path."
    return PatchEntry({"op": PatchOp.MOVE, "from": from_, "path": path})

def op_copy(from_, path):
    "Create a patch entry to copy the value at from_ to path."
    return PatchEntry({"op": PatchOp.COPY, "from": from_, "path": path})

def op_test(path, value):
    "Create a patch entry asserting that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=path, value=value)


def validate_patch_entry(e):
    """Check that e is a well formed patch operation.

    Raises UnsupportedOperation, MissingRequiredField or InvalidPath
    if not well formed. Path syntax itself is checked when the
    operation is applied.
    """
    if not isinstance(e, dict):
        raise UnsupportedOperation(
            "patch operation must be a mapping, not '{}'.".format(e))
    if "op" not in e:
        raise MissingRequiredField("op", path=e.get("path"))
    op = e["op"]
    if not isinstance(op, str) or op not in REQUIRED_FIELDS:
        raise UnsupportedOperation(
            "Unknown patch op '{}'.".format(op), path=e.get("path"))
    for field in REQUIRED_FIELDS[op]:
        if field not in e:
            raise MissingRequiredField(field, path=e.get("path"), op=op)
    for field in PATH_FIELDS:
        if field in REQUIRED_FIELDS[op] and not isinstance(e[field], str):
            raise InvalidPath(
                "'{}' must be a string, not '{}'.".format(field, e[field]), op=op)
        if field in REQUIRED_FIELDS[op] and not e[field]:
            raise InvalidPath("'{}' must not be empty.".format(field), op=op)


def validate_patch(patch):
    """Check whether a patch (list of patch operations) is well formed.

    Raises a PatchError subclass if not well formed.
    """
    if not isinstance(patch, (list, tuple)):
        raise UnsupportedOperation("A patch must be a list of operations.")
    for e in patch:
        validate_patch_entry(e)


def is_valid_patch(patch):
    "Returns a boolean indicating the well-formedness of the patch."
    try:
        validate_patch(patch)
    except PatchError:
        return False
    return True


def to_patch_entries(patch):
    "Convert plain dicts (e.g. loaded from json) to PatchEntry objects."
    if isinstance(patch, dict):
        return PatchEntry(patch)
    return [PatchEntry(e) if isinstance(e, dict) else e for e in patch]
