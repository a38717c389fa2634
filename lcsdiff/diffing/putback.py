# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = ["PutBack", "Missing"]


# Sentinel to allow None as a value
Missing = object()


class PutBack(object):
    """Iterator wrapper allowing a single consumed item to be pushed back.

    The pushed back item is the next one returned, after which items
    are again pulled from the wrapped iterator. The direction of
    iteration is whatever the wrapped iterator provides.
    """

    def __init__(self, iterable):
        self._it = iter(iterable)
        self._pending = Missing

    def __iter__(self):
        return self

    def __next__(self):
        if self._pending is not Missing:
            item = self._pending
            self._pending = Missing
            return item
        return next(self._it)

    @property
    def has_pending(self):
        return self._pending is not Missing

    def put_back(self, item):
        "Make item the next value returned by this iterator."
        if self._pending is not Missing:
            raise ValueError("Only a single item can be put back at a time.")
        self._pending = item
