import io
import json
import os

import pytest
from jsonschema import Draft4Validator as Validator
from jsonschema.exceptions import ValidationError

from docpatch.errors import InvalidPath, MissingRequiredField, UnsupportedOperation
from docpatch.patch_format import (
    op_add, op_remove, op_replace, op_move, op_copy, op_test,
    validate_patch, validate_patch_entry, is_valid_patch, to_patch_entries, PatchEntry)


def _all_ops():
    return [
        op_add("/a", 1),
        op_remove("$/a/*"),
        op_replace("/a", None),
        op_move("/a", "/b"),
        op_copy("$/a/*", "/b/-"),
        op_test("/a", {"x": [1]}),
    ]


def test_check_schema(json_schema_patch):
    Validator.check_schema(json_schema_patch)


def test_validate_constructed_patch(patch_validator):
    patch = _all_ops()
    patch_validator.validate(patch)
    validate_patch(patch)
    assert is_valid_patch(patch)


@pytest.mark.parametrize("filename", ["library-patch.json", "library-failing-patch.json"])
def test_validate_patch_files(filespath, patch_validator, filename):
    with io.open(os.path.join(filespath, filename), encoding="utf8") as f:
        patch = json.load(f)
    patch_validator.validate(patch)
    assert is_valid_patch(patch)


@pytest.mark.parametrize("entry, error", [
    ({"op": "merge", "path": "/a"}, UnsupportedOperation),
    ({"op": ["add"], "path": "/a"}, UnsupportedOperation),
    ({"path": "/a"}, MissingRequiredField),
    ({"op": "add", "path": "/a"}, MissingRequiredField),
    ({"op": "move", "path": "/a"}, MissingRequiredField),
    ({"op": "test", "value": 1}, MissingRequiredField),
    ({"op": "remove", "path": ""}, InvalidPath),
    ({"op": "copy", "from": 3, "path": "/a"}, InvalidPath),
])
def test_schema_and_validation_agree_on_bad_entries(patch_validator, entry, error):
    with pytest.raises(ValidationError):
        patch_validator.validate([entry])
    with pytest.raises(error):
        validate_patch_entry(entry)
    assert not is_valid_patch([entry])


def test_patch_must_be_a_list():
    with pytest.raises(UnsupportedOperation):
        validate_patch({"op": "add", "path": "/a", "value": 1})
    assert not is_valid_patch("add")


def test_to_patch_entries():
    entries = to_patch_entries([{"op": "remove", "path": "/a"}])
    assert isinstance(entries[0], PatchEntry)
    assert entries[0].path == "/a"
    entry = to_patch_entries({"op": "copy", "from": "/a", "path": "/b"})
    assert entry.from_ == "/a"
