#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import traceback

from .Obj import Obj


class Err(Exception, Obj):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        Obj.__init__(self)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, not None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        qname = self.qname()
        if self._msg:
            return f"{qname}: {self._msg}"
        return qname

    def trace_to_str(self):
        """Return stack trace as string"""
        s = self.to_str()

        tb = getattr(self, '__traceback__', None)
        if tb:
            s += "\n" + "".join(traceback.format_tb(tb))

        if self._cause:
            if isinstance(self._cause, Err):
                s += "\n  Caused by: " + self._cause.trace_to_str()
            else:
                s += f"\n  Caused by: {self._cause!r}"

        return s

    def is_immutable(self):
        return True

    def __str__(self):
        return self.to_str()


class ParseErr(Err):
    """Parse error - the input string is not in a recognized format"""

    def __init__(self, msg=None, cause=None, input=None):
        super().__init__(msg, cause)
        self._input = input

    @staticmethod
    def make_str(type_name, s, cause=None):
        return ParseErr(f"String '{s}' was not recognized as a valid {type_name}.", cause, s)

    def input(self):
        """The offending string, or None if unknown"""
        return self._input


class ArgErr(Err):
    """Argument error"""
    pass


class UnsupportedErr(Err):
    """Unsupported operation error"""
    pass


class NameErr(Err):
    """Invalid name error"""
    pass
