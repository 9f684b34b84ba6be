#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Enum(Obj):
    """
    Base class for all runtime enum types.
    """

    def __init__(self, ordinal=0, name=""):
        self._ordinal = ordinal
        self._name = name

    def ordinal(self):
        """Return ordinal value"""
        return self._ordinal

    def name(self):
        """Return enum name"""
        return self._name

    def to_str(self):
        return self._name

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"{type(self).__name__}.{self._name}"

    def equals(self, other):
        """Enums are singletons - use identity comparison"""
        return self is other

    def compare(self, other):
        """Compare by ordinal"""
        return self._ordinal - other._ordinal

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def is_immutable(self):
        """Enums are always immutable"""
        return True
