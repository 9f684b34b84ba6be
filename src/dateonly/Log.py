#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import logging

from .Obj import Obj


class LogLevel(Obj):
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal):
        self._name = name
        self._ordinal = ordinal

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        level = LogLevel._levels.get(name.lower())
        if level is not None:
            return level
        if checked:
            from .Err import ParseErr
            raise ParseErr.make_str("LogLevel", name)
        return None

    @staticmethod
    def vals():
        return (LogLevel._debug, LogLevel._info, LogLevel._warn, LogLevel._err, LogLevel._silent)

    @staticmethod
    def debug(): return LogLevel._debug
    @staticmethod
    def info(): return LogLevel._info
    @staticmethod
    def warn(): return LogLevel._warn
    @staticmethod
    def err(): return LogLevel._err
    @staticmethod
    def silent(): return LogLevel._silent

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def to_str(self):
        return self._name

    def compare(self, other):
        return self._ordinal - other._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)


LogLevel._debug = LogLevel("debug", 0)
LogLevel._info = LogLevel("info", 1)
LogLevel._warn = LogLevel("warn", 2)
LogLevel._err = LogLevel("err", 3)
LogLevel._silent = LogLevel("silent", 4)

for _level in LogLevel.vals():
    LogLevel._levels[_level._name] = _level
del _level


class LogRec(Obj):
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, log_name, msg, err=None):
        super().__init__()
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = msg
        self._err = err

    def time(self):
        return self._time

    def level(self):
        return self._level

    def log_name(self):
        return self._log_name

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def to_str(self):
        return f"[{self._level.name()}] {self._log_name}: {self._msg}"


class Log(Obj):
    """
    Log provides logging on top of the standard logging package.
    """

    _logs = {}
    _handlers = []  # Global handlers (static)

    _PY_LEVELS = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "err": logging.ERROR,
    }

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._is_valid_name(name):
            from .Err import NameErr
            raise NameErr(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr(f"Log already registered: {name}")

        super().__init__()
        self._name = name
        self._level = Log._default_level()
        self._py_logger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _default_level():
        """Initial level from the logLevel config key, info if unset"""
        from .Env import Env
        name = Env.cur().config("logLevel", "info")
        level = LogLevel.from_str(name, False)
        return level if level is not None else LogLevel._info

    @staticmethod
    def _is_valid_name(name):
        """Log names are made of alphanumerics, '.' and '_'"""
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def make(name, register=True):
        return Log(name, register)

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    @staticmethod
    def find(name, checked=True):
        if name in Log._logs:
            return Log._logs[name]
        if checked:
            from .Err import Err
            raise Err(f"Unknown log: {name}")
        return None

    @staticmethod
    def list_():
        return list(Log._logs.values())

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(new_level)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level._ordinal >= self._level._ordinal

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel._debug):
            self._log(LogLevel._debug, msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel._info):
            self._log(LogLevel._info, msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel._warn):
            self._log(LogLevel._warn, msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel._err):
            self._log(LogLevel._err, msg, err)

    def _log(self, level, msg, err):
        from .DateTime import DateTime
        rec = LogRec(DateTime.now_utc(), level, self._name, msg, err)
        self.log(rec)

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in Log._handlers:
            try:
                handler(rec)
            except Exception:
                self._py_logger.exception("Log handler failed: %r", handler)

        py_level = Log._PY_LEVELS.get(rec._level._name, logging.INFO)
        if rec._err is not None:
            self._py_logger.log(py_level, rec._msg, exc_info=rec._err)
        else:
            self._py_logger.log(py_level, rec._msg)

    def to_str(self):
        return self._name

    @staticmethod
    def handlers():
        return list(Log._handlers)

    @staticmethod
    def add_handler(handler):
        """Add a global log handler"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr(f"Handler not callable: {handler!r}")
        Log._handlers.append(handler)

    @staticmethod
    def remove_handler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
