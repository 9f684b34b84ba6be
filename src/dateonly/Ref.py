#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Ref(Obj):
    """Mutable reference cell used as an output parameter.

    Usage:
        ref = Ref()
        if DateOnly.try_parse("12/30/2024", ref):
            use(ref.val())
    """

    def __init__(self, val=None):
        super().__init__()
        self._val = val

    @staticmethod
    def make(val=None):
        return Ref(val)

    def val(self):
        """Get current value"""
        return self._val

    def set(self, val):
        """Replace the current value and return it"""
        self._val = val
        return val

    def to_str(self):
        return f"Ref({self._val!r})"
