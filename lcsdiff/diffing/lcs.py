# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
from collections.abc import Sequence

from ..config import get_configured
from ..edits import op_copy, op_insert, op_remove
from ..log import debug, warning
from .putback import PutBack, Missing

__all__ = ["LcsTable", "build_table", "diff_ordered", "diff_unordered"]


class LcsTable(object):
    """Grid of llcs lengths between all prefixes of two sequences.

    cell(i, j) == llcs(x[:i], y[:j]) for 0 <= i <= x_len, 0 <= j <= y_len.
    """

    def __init__(self, rows):
        self._rows = rows
        self.x_len = len(rows) - 1
        self.y_len = len(rows[0]) - 1

    def cell(self, i, j):
        # Negative indices must not wrap around to the end of the grid
        if not (0 <= i <= self.x_len and 0 <= j <= self.y_len):
            raise IndexError("LCS table index ({}, {}) outside of {}x{} table.".format(
                i, j, self.x_len + 1, self.y_len + 1))
        return self._rows[i][j]

    @property
    def llcs(self):
        "Length of the longest common subsequence of x and y."
        return self._rows[self.x_len][self.y_len]

    def rows(self):
        return [list(row) for row in self._rows]

    def __repr__(self):
        return "<LcsTable {}x{} llcs={}>".format(self.x_len + 1, self.y_len + 1, self.llcs)


def build_table(x, y, x_len=None, y_len=None, compare=operator.__eq__, warn_cells=None):
    """Compute the table of llcs lengths of all prefixes of x and y.

    x is only iterated once, while y is scanned once for each
    element of x and is therefore materialized to a sequence.
    When x_len or y_len are given they must match the number
    of elements in x and y.

    A warning is logged for tables with more than warn_cells
    cells, 0 disables it. If not given, the configured
    Diff.table_warning_cells is used.
    """
    if not isinstance(y, Sequence):
        y = list(y)
    if x_len is None:
        x_len = len(x)
    if y_len is None:
        y_len = len(y)
    if len(y) != y_len:
        raise IndexError("Expected {} elements in y, got {}.".format(y_len, len(y)))

    cells = (x_len + 1) * (y_len + 1)
    debug("Building LCS table of %d x %d", x_len + 1, y_len + 1)
    if warn_cells is None:
        warn_cells = get_configured('diff').table_warning_cells
    if warn_cells and cells > warn_cells:
        warning("LCS table with %d cells exceeds the limit of %d cells.", cells, warn_cells)

    R = [[0]*(y_len+1) for i in range(x_len+1)]
    i = 0
    for i, a in enumerate(x, 1):
        if i > x_len:
            raise IndexError("Expected {} elements in x, got more.".format(x_len))
        prev = R[i-1]
        row = R[i]
        for j in range(1, y_len+1):
            if compare(a, y[j-1]):
                row[j] = prev[j-1] + 1
            else:
                row[j] = max(prev[j], row[j-1])
    if i != x_len:
        raise IndexError("Expected {} elements in x, got {}.".format(x_len, i))
    return LcsTable(R)


def _backtrack(table, x, y, compare):
    """Walk table from its last cell towards the origin.

    x and y are PutBack iterators yielding the elements of
    the sequences from the end. Returns the edits in forward
    order and whether any of them was an insert or remove.
    """
    i = table.x_len
    j = table.y_len
    edits = []
    modified = False
    while True:
        current_x = next(x, Missing)
        current_y = next(y, Missing)

        # A missing neighbour compares below any table value, a cursor
        # moved past the origin fails the bounds check
        left = table.cell(i, j-1) if j != 0 else -1
        above = table.cell(i-1, j) if i != 0 else -1

        if (current_x is not Missing and current_y is not Missing
                and compare(current_x, current_y)):
            i -= 1
            j -= 1
            edits.append(op_copy(current_x))
        elif current_y is not Missing and (current_x is Missing or left >= above):
            if current_x is not Missing:
                x.put_back(current_x)
            j -= 1
            edits.append(op_insert(current_y))
            modified = True
        elif current_x is not Missing and (current_y is Missing or left < above):
            if current_y is not Missing:
                y.put_back(current_y)
            i -= 1
            edits.append(op_remove(current_x))
            modified = True
        else:
            break
    edits.reverse()
    return edits, modified


def diff_ordered(table, x, y, compare=operator.__eq__):
    """Compute the edit script turning x into y.

    x and y must be the reversible sequences table was built from.
    Returns the list of edits and whether any of them was an insert
    or remove. When several minimal scripts exist, inserts are
    preferred over removes at each tie.
    """
    return _backtrack(table, PutBack(reversed(x)), PutBack(reversed(y)), compare)


def diff_unordered(table, x, y, compare=operator.__eq__):
    """Compute the edit script turning collection x into collection y.

    For collections without a meaningful direction, like sets.
    The iteration order of x and y is used as is and treated as
    reversed with respect to the order table was built in.
    """
    return _backtrack(table, PutBack(x), PutBack(y), compare)
