# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import (
    build_table, diff_ordered, diff_unordered, diff_sequence, diff_collection)
from .edits import Edit, EditOp, op_copy, op_insert, op_remove


__all__ = [
    "__version__",
    "build_table", "diff_ordered", "diff_unordered",
    "diff_sequence", "diff_collection",
    "Edit", "EditOp", "op_copy", "op_insert", "op_remove",
    ]
