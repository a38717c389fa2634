# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .lcs import build_table, diff_ordered, diff_unordered

__all__ = ["diff_sequence", "diff_collection", "diff_strings_by_char",
           "diff_strings_linewise", "diff_strings_wordwise"]


def diff_sequence(a, b, compare=operator.__eq__, warn_cells=None):
    """Compute the edit script of two sequences.

    I.e. this does not recursively diff elements of the sequences.

    Returns a list of edits and a flag telling whether the
    sequences differ.
    """
    table = build_table(a, b, len(a), len(b), compare, warn_cells)
    return diff_ordered(table, a, b, compare)


def _arrange_like(xs, b, compare):
    "Order the items of b matching items of xs like in xs, followed by the rest."
    remaining = list(b)
    matched = []
    for x in xs:
        for k, y in enumerate(remaining):
            if compare(x, y):
                matched.append(remaining.pop(k))
                break
    return matched + remaining


def diff_collection(a, b, compare=operator.__eq__, warn_cells=None):
    """Compute the edit script of two collections without order, e.g. sets.

    Every item of a with a matching item in b is copied, so the
    result is only modified when the collections hold different items.
    """
    xs = list(a)
    ys = _arrange_like(xs, b, compare)
    table = build_table(reversed(xs), ys[::-1], len(xs), len(ys), compare, warn_cells)
    return diff_unordered(table, xs, ys, compare)


def diff_strings_by_char(a, b):
    "Compute char-based edit script of two strings."
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    return diff_sequence(a, b)


def diff_strings_linewise(a, b):
    """Compute line-based edit script of two strings.

    Lines keep their line endings.
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    return diff_sequence(a.splitlines(True), b.splitlines(True))


def diff_strings_wordwise(a, b):
    "Compute edit script of the whitespace separated words of two strings."
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    return diff_sequence(a.split(), b.split())
