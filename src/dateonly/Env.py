#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os
from pathlib import Path

from .Obj import Obj


class Env(Obj):
    """Runtime environment: process variables and pod configuration"""

    _instance = None

    # Prefix for environment variables that override config.props keys
    _VAR_PREFIX = "DATEONLY_"

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def __init__(self):
        super().__init__()
        self._props_cache = None

    def runtime(self):
        return "py"

    def vars(self):
        """Return a snapshot of the process environment variables"""
        return dict(os.environ)

    def home_dir(self):
        """Installation home directory, from DATEONLY_HOME, or None if unset"""
        home = os.environ.get(f"{Env._VAR_PREFIX}HOME")
        if home:
            return Path(home)
        return None

    def props(self):
        """Load etc/dateonly/config.props under the home directory.

        Returns an empty dict when no home directory or props file exists.
        The file is read once and cached.
        """
        if self._props_cache is not None:
            return self._props_cache

        props = {}
        home = self.home_dir()
        if home is not None:
            props_file = home / "etc" / "dateonly" / "config.props"
            if props_file.exists():
                props = Env._parse_props(props_file.read_text(encoding="utf-8"))

        self._props_cache = props
        return props

    @staticmethod
    def _parse_props(text):
        """Parse key=value lines; blank lines and // or # comments are skipped"""
        props = {}
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("//") or line.startswith("#"):
                continue
            eq = line.find("=")
            if eq < 0:
                continue
            props[line[:eq].strip()] = line[eq + 1:].strip()
        return props

    def config(self, key, def_val=None):
        """Get configuration value.

        Resolution order: DATEONLY_<KEY> environment variable, then
        config.props under the home directory, then def_val.
        """
        val = os.environ.get(Env._VAR_PREFIX + key.upper())
        if val:
            return val

        val = self.props().get(key)
        if val is not None:
            return val

        return def_val

    @staticmethod
    def _reset():
        """Drop the cached environment so config is reloaded"""
        Env._instance = None
