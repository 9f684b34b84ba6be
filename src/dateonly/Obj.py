#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for all runtime objects"""

    _hash_counter = 0

    def __init__(self):
        Obj._hash_counter += 1
        self._hash = Obj._hash_counter

    def equals(self, that):
        return self is that

    def hash_(self):
        # Lazily initialize _hash if not set (factories may bypass __init__)
        if not hasattr(self, '_hash'):
            Obj._hash_counter += 1
            self._hash = Obj._hash_counter
        return self._hash

    def compare(self, that):
        """Compare this object to that for ordering.

        Returns -1 if this < that, 0 if equal, 1 if this > that. Types with
        a natural order override this; others only compare equal to themselves.
        """
        if self is that or self.equals(that):
            return 0
        from .Err import UnsupportedErr
        raise UnsupportedErr.make(f"{self.qname()} has no ordering")

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash_()

    def to_str(self):
        return f"{type(self).__name__}@{self.hash_()}"

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return self.to_str()

    def qname(self):
        """Qualified type name, e.g. 'dateonly::DateOnly'"""
        return f"dateonly::{type(self).__name__}"

    def is_immutable(self):
        return False
