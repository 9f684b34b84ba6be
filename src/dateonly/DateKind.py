#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Enum import Enum


class DateKind(Enum):
    """Tags a DateTime as UTC, local wall time, or unspecified."""

    _vals = None

    @staticmethod
    def _make_enum(ordinal, name):
        inst = object.__new__(DateKind)
        inst._ordinal = ordinal
        inst._name = name
        return inst

    @staticmethod
    def vals():
        """All kinds in ordinal order"""
        if DateKind._vals is None:
            DateKind._vals = (
                DateKind._make_enum(0, "unspecified"),
                DateKind._make_enum(1, "utc"),
                DateKind._make_enum(2, "local"),
            )
        return DateKind._vals

    @staticmethod
    def unspecified(): return DateKind.vals()[0]
    @staticmethod
    def utc(): return DateKind.vals()[1]
    @staticmethod
    def local(): return DateKind.vals()[2]

    @staticmethod
    def from_str(name, checked=True):
        for v in DateKind.vals():
            if v._name == name:
                return v
        if checked:
            from .Err import ParseErr
            raise ParseErr.make_str("DateKind", name)
        return None

    def is_utc(self):
        return self._ordinal == 1
