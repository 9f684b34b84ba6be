#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from datetime import datetime as py_datetime, timezone
import os
import zoneinfo

from .Obj import Obj


class TimeZone(Obj):
    """TimeZone maps UTC instants to wall-clock offsets."""

    _cache = {}
    _utc = None
    _cur = None

    _LOCALTIME = "/etc/localtime"

    # Alternate spellings of UTC
    _aliases = {
        "Etc/UTC": "UTC",
        "Etc/GMT": "UTC",
        "GMT": "UTC",
        "Z": "UTC",
    }

    def __init__(self, name, tz, full_name=None):
        super().__init__()
        self._name = name.split('/')[-1]
        self._full_name = full_name if full_name is not None else name
        self._tz = tz

    @staticmethod
    def utc():
        """Get the UTC timezone"""
        if TimeZone._utc is None:
            TimeZone._utc = TimeZone("UTC", timezone.utc, "Etc/UTC")
            TimeZone._cache["UTC"] = TimeZone._utc
        return TimeZone._utc

    @staticmethod
    def cur():
        """Get the current default timezone.

        Taken from the 'tz' config key when set, otherwise the host's
        local zone as reported by the platform.
        """
        if TimeZone._cur is None:
            from .Env import Env
            from .Log import Log
            name = Env.cur().config("tz")
            if name:
                TimeZone._cur = TimeZone.from_str(name, checked=False)
                if TimeZone._cur is None:
                    Log.get("dateonly").warn(f"Unknown tz config '{name}', using host zone")
            if TimeZone._cur is None:
                TimeZone._cur = TimeZone._host()
        return TimeZone._cur

    @staticmethod
    def _host():
        """Zone of the host clock.

        Resolved to a named zone from the TZ variable, then from the target
        of the /etc/localtime link, so daylight saving rules apply. Falls
        back to the fixed offset the platform reports right now.
        """
        from .Env import Env
        for name in (Env.cur().vars().get("TZ", "").lstrip(":"), TimeZone._localtime_name()):
            if name:
                tz = TimeZone.from_str(name, checked=False)
                if tz is not None:
                    return tz

        local_tz = py_datetime.now().astimezone().tzinfo
        offset = local_tz.utcoffset(None)
        if offset is None or offset.total_seconds() == 0:
            return TimeZone.utc()
        return TimeZone(local_tz.tzname(None) or "Local", local_tz)

    @staticmethod
    def _localtime_name():
        """IANA name /etc/localtime links to, or None"""
        path = os.path.realpath(TimeZone._LOCALTIME)
        i = path.rfind("/zoneinfo/")
        if i < 0:
            return None
        name = path[i + len("/zoneinfo/"):]
        if name.startswith("posix/"):
            name = name[len("posix/"):]
        return name

    @staticmethod
    def _reset():
        """Forget the cached current zone so config is read again"""
        TimeZone._cur = None

    @staticmethod
    def from_str(name, checked=True):
        """Find timezone by name (short aliases or IANA names)"""
        if name in TimeZone._aliases:
            name = TimeZone._aliases[name]

        if name == "UTC":
            return TimeZone.utc()

        if name in TimeZone._cache:
            return TimeZone._cache[name]

        try:
            tz = zoneinfo.ZoneInfo(name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
            if checked:
                from .Err import ParseErr
                raise ParseErr.make_str("TimeZone", name)
            return None

        result = TimeZone(name, tz)
        TimeZone._cache[name] = result
        return result

    def name(self):
        """Short name like 'New_York'"""
        return self._name

    def full_name(self):
        """Full name like 'America/New_York'"""
        return self._full_name

    def offset_secs(self, dt):
        """UTC offset in seconds (positive = east of UTC) at the given DateTime.

        The UTC wall fields of the instant are converted into this zone; at the
        edges of the supported range, where the conversion would overflow, the
        fields are interpreted as wall time instead. Instants in year 0 or
        10000 use the offset at the nearest end of the range.
        """
        if dt.year() < 1:
            utc_dt = py_datetime.min.replace(tzinfo=timezone.utc)
        elif dt.year() > 9999:
            utc_dt = py_datetime.max.replace(tzinfo=timezone.utc)
        else:
            utc_dt = py_datetime(dt.year(), dt.month(), dt.day(),
                                 dt.hour(), dt.min_(), dt.sec(), tzinfo=timezone.utc)
        try:
            offset = utc_dt.astimezone(self._tz).utcoffset()
        except OverflowError:
            offset = self._tz.utcoffset(utc_dt.replace(tzinfo=None))
        if offset is None:
            return 0
        return int(offset.total_seconds())

    def to_str(self):
        return self._name

    def equals(self, other):
        if not isinstance(other, TimeZone):
            return False
        return self._full_name == other._full_name

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash(self._full_name)
