import pytest

from docpatch import apply_patches, query_pointers
from docpatch.patch_format import op_add, op_remove, op_replace, op_test, op_copy


def _make_doc(n):
    return {
        "rows": [{"id": i, "cells": [{"v": j} for j in range(10)]} for i in range(n)],
    }


@pytest.mark.slow
def test_wildcard_patch_on_large_document():
    n = 2000
    doc = _make_doc(n)
    patch = [
        op_add("$/rows/*/flag", False),
        op_replace("$/rows/*/cells/*/v", 0),
        op_test("$/rows/*/cells/*/v", 0),
        op_copy("/rows/0/cells/0", "$/rows/*/cells/-"),
        op_remove("$/rows/*/id"),
    ]
    result = apply_patches(doc, patch)

    assert len(result["rows"]) == n
    for row in result["rows"]:
        assert row["flag"] is False
        assert "id" not in row
        assert len(row["cells"]) == 11
        assert all(c == {"v": 0} for c in row["cells"])
    assert doc["rows"][5]["cells"][3] == {"v": 3}


@pytest.mark.slow
def test_large_query_order():
    doc = _make_doc(500)
    pointers = query_pointers("$/rows/*/cells/*", doc)
    assert len(pointers) == 5000
    assert pointers[:2] == ["/rows/0/cells/0", "/rows/0/cells/1"]
    assert pointers[-1] == "/rows/499/cells/9"
