# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple


class EditOp:
    "Collection of valid values for the op field of an edit."
    COPY = "copy"
    INSERT = "insert"
    REMOVE = "remove"


class Edit(namedtuple("Edit", ["op", "value"])):
    """A single step of an edit script.

    A copy keeps a value present in both sequences, an insert adds
    a value only present in the target sequence and a remove drops
    a value only present in the source sequence.
    """
    __slots__ = ()

    @property
    def is_copy(self):
        return self.op == EditOp.COPY

    @property
    def is_insert(self):
        return self.op == EditOp.INSERT

    @property
    def is_remove(self):
        return self.op == EditOp.REMOVE

    def __repr__(self):
        return "{}({!r})".format(self.op.capitalize(), self.value)


def op_copy(value):
    "Create an edit keeping value unchanged."
    return Edit(EditOp.COPY, value)

def op_insert(value):
    "Create an edit adding value to the source."
    return Edit(EditOp.INSERT, value)

def op_remove(value):
    "Create an edit dropping value from the source."
    return Edit(EditOp.REMOVE, value)


_inverse_ops = {
    EditOp.COPY: EditOp.COPY,
    EditOp.INSERT: EditOp.REMOVE,
    EditOp.REMOVE: EditOp.INSERT,
}


def source_values(edits):
    "Return the values of the source sequence described by edits."
    return [e.value for e in edits if e.op != EditOp.INSERT]


def target_values(edits):
    "Return the values of the target sequence described by edits."
    return [e.value for e in edits if e.op != EditOp.REMOVE]


def is_modified(edits):
    "Return True if any edit inserts or removes a value."
    return any(e.op != EditOp.COPY for e in edits)


def invert_edits(edits):
    """Return the edit script going from target back to source.

    Inserts become removes and vice versa, copies are kept.
    """
    return [Edit(_inverse_ops[e.op], e.value) for e in edits]
