# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from lcsdiff import diff_sequence
from lcsdiff.edits import (
    Edit, EditOp, op_copy, op_insert, op_remove,
    source_values, target_values, is_modified, invert_edits)


def test_edit_constructors():
    e = op_copy("a")
    assert e == Edit(EditOp.COPY, "a")
    assert e.is_copy and not e.is_insert and not e.is_remove
    assert op_insert(1).is_insert
    assert op_remove(None).is_remove
    assert op_remove(None).value is None
    assert op_insert(1) != op_remove(1)
    assert repr(op_insert([1])) == "Insert([1])"


def test_edit_projections():
    edits = [op_remove("X"), op_copy("M"), op_insert("Z"), op_copy("J")]
    assert source_values(edits) == ["X", "M", "J"]
    assert target_values(edits) == ["M", "Z", "J"]
    assert is_modified(edits)
    assert not is_modified([op_copy(1), op_copy(2)])
    assert not is_modified([])


def test_invert_edits():
    a = list("XMJYAUZ")
    b = list("MZJAWXU")
    edits, _ = diff_sequence(a, b)
    inverted = invert_edits(edits)
    assert source_values(inverted) == b
    assert target_values(inverted) == a
    assert [e.value for e in inverted] == [e.value for e in edits]
    assert invert_edits(inverted) == edits
