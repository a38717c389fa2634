# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .lcs import LcsTable, build_table, diff_ordered, diff_unordered
from .sequences import diff_sequence, diff_collection

__all__ = [
    "LcsTable", "build_table", "diff_ordered", "diff_unordered",
    "diff_sequence", "diff_collection",
    ]
