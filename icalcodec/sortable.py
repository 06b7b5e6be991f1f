#! /usr/bin/env python
"""Comparison support for the value classes"""


class SortableMixin(object):

    """Mixin class for handling comparisons

    Classes must define a method :meth:`sortkey` which returns a
    sortable key value representing the instance.

    Derived classes may optionally override :meth:`otherkey` to provide
    an ordering against other object types.

    This mixin then adds implementations for all of the comparison
    methods: __eq__, __ne__, __lt__, __le__, __gt__, __ge__ and a
    matching __hash__."""

    def sortkey(self):
        """Returns a value to use as a key for sorting.

        By default returns NotImplemented.  This value causes the
        comparison functions to also return NotImplemented."""
        return NotImplemented

    def otherkey(self, other):
        """Returns a value to use as a key for sorting

        The difference between this method and :meth:`sortkey` is that
        this method takes an arbitrary object and either returns the key
        to use when comparing with this instance or NotImplemented if
        the sorting is not supported.

        By default returns other.sortkey() if *other* is an instance of
        the same class as *self*, otherwise it returns NotImplemented."""
        if isinstance(other, self.__class__):
            return other.sortkey()
        else:
            return NotImplemented

    def _keys(self, other):
        a = self.sortkey()
        b = self.otherkey(other)
        if a is NotImplemented or b is NotImplemented:
            return None
        return a, b

    def __eq__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] == keys[1]

    def __ne__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] != keys[1]

    def __lt__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] >= keys[1]

    def __hash__(self):
        return hash(self.sortkey())
