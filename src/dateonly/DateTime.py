#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import time
from datetime import date as py_date

from .Obj import Obj
from .DateKind import DateKind


class DateTime(Obj):
    """DateTime represents an absolute instant in time with 100ns tick precision.

    Ticks count from the Unix epoch 1970-01-01T00:00:00Z. Calendar fields are
    always the UTC fields of the instant; the kind tag only records how the
    value is meant to be read (UTC, local wall time or unspecified).

    Local and unspecified instants may lie up to one day past either end of
    the range, so every local wall time of 0001-01-01..9999-12-31 has one.
    """

    # Ticks (100 ns) per unit - use these constants for precision
    _TICKS_PER_MS = 10_000
    _TICKS_PER_SEC = 1000 * _TICKS_PER_MS
    _TICKS_PER_MIN = 60 * _TICKS_PER_SEC
    _TICKS_PER_HOUR = 60 * _TICKS_PER_MIN
    _TICKS_PER_DAY = 24 * _TICKS_PER_HOUR

    # Proleptic Gregorian ordinal of 1970-01-01 (0001-01-01 is ordinal 1)
    _EPOCH_ORDINAL = py_date(1970, 1, 1).toordinal()

    # Valid range 0001-01-01T00:00:00 to 9999-12-31T23:59:59.9999999
    _MIN_TICKS = (py_date.min.toordinal() - _EPOCH_ORDINAL) * _TICKS_PER_DAY
    _MAX_TICKS = (py_date.max.toordinal() - _EPOCH_ORDINAL + 1) * _TICKS_PER_DAY - 1

    _MAX_ORDINAL = py_date.max.toordinal()

    # Gregorian calendar (and weekdays) repeat every 400 years
    _DAYS_PER_400_YEARS = 146097

    _DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    _DAYS_BEFORE_MONTH = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]
    _DAYS_BEFORE_MONTH_LEAP = [0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335]

    def __init__(self, ticks, kind=None):
        super().__init__()
        if kind is None:
            kind = DateKind.utc()
        slack = 0 if kind.is_utc() else DateTime._TICKS_PER_DAY
        if ticks < DateTime._MIN_TICKS - slack or ticks > DateTime._MAX_TICKS + slack:
            from .Err import ArgErr
            raise ArgErr.make(f"Ticks out of range: {ticks}")

        days, rem = divmod(ticks, DateTime._TICKS_PER_DAY)

        self._ticks = ticks
        self._kind = kind
        self._year, self._month, self._day, self._weekday = DateTime._civil(days)
        self._hour = rem // DateTime._TICKS_PER_HOUR
        self._min = (rem // DateTime._TICKS_PER_MIN) % 60
        self._sec = (rem // DateTime._TICKS_PER_SEC) % 60
        self._frac = rem % DateTime._TICKS_PER_SEC

    @staticmethod
    def _civil(days):
        """Year, month, day and weekday (0=Sun) of a day count since 1970-01-01.

        Days just outside 0001..9999 are moved one 400 year cycle into the
        range of datetime.date and the year moved back afterwards.
        """
        ordinal = days + DateTime._EPOCH_ORDINAL
        shift = 0
        if ordinal < 1:
            ordinal += DateTime._DAYS_PER_400_YEARS
            shift = -400
        elif ordinal > DateTime._MAX_ORDINAL:
            ordinal -= DateTime._DAYS_PER_400_YEARS
            shift = 400
        d = py_date.fromordinal(ordinal)
        return d.year + shift, d.month, d.day, d.isoweekday() % 7

    @staticmethod
    def _is_leap_year(year):
        """Check if year is a leap year"""
        if (year & 3) != 0:
            return False
        return (year % 100 != 0) or (year % 400 == 0)

    @staticmethod
    def is_leap_year(year):
        return DateTime._is_leap_year(year)

    @staticmethod
    def days_in_month(year, month):
        """Number of days in the 1-based month of the given year"""
        if month == 2 and DateTime._is_leap_year(year):
            return 29
        return DateTime._DAYS_IN_MONTH[month - 1]

    @staticmethod
    def make_ticks(ticks, kind=None):
        """Create DateTime from ticks (100 ns units since 1970-01-01 UTC)"""
        return DateTime(ticks, kind)

    @staticmethod
    def from_millis(millis, kind=None):
        """Create DateTime from milliseconds since the Unix epoch"""
        return DateTime(millis * DateTime._TICKS_PER_MS, kind)

    @staticmethod
    def make_utc(year, month=1, day=1, hour=0, min_=0, sec=0, ms=0):
        """Create a UTC DateTime from calendar fields.

        Years are taken literally; 1-99 are not treated as two-digit years.
        """
        from .Err import ArgErr
        if year < 1 or year > 9999:
            raise ArgErr.make(f"Year out of range: {year}")
        if month < 1 or month > 12:
            raise ArgErr.make(f"Month out of range: {month}")
        if day < 1 or day > DateTime.days_in_month(year, month):
            raise ArgErr.make(f"Day out of range: {day}")
        if hour < 0 or hour > 23:
            raise ArgErr.make(f"Hour out of range: {hour}")
        if min_ < 0 or min_ > 59:
            raise ArgErr.make(f"Minute out of range: {min_}")
        if sec < 0 or sec > 59:
            raise ArgErr.make(f"Second out of range: {sec}")
        if ms < 0 or ms > 999:
            raise ArgErr.make(f"Millisecond out of range: {ms}")

        days = py_date(year, month, day).toordinal() - DateTime._EPOCH_ORDINAL
        ticks = (days * DateTime._TICKS_PER_DAY +
                 hour * DateTime._TICKS_PER_HOUR +
                 min_ * DateTime._TICKS_PER_MIN +
                 sec * DateTime._TICKS_PER_SEC +
                 ms * DateTime._TICKS_PER_MS)
        return DateTime(ticks, DateKind.utc())

    @staticmethod
    def _now_ticks_raw():
        """Get current time as raw ticks.

        Truncated to millisecond precision so now() values round trip
        through millis() and from_millis().
        """
        unix_ns = time.time_ns()
        unix_ms = unix_ns // 1_000_000
        return unix_ms * DateTime._TICKS_PER_MS

    @staticmethod
    def now():
        """Current instant, tagged as local time"""
        return DateTime(DateTime._now_ticks_raw(), DateKind.local())

    @staticmethod
    def now_utc():
        """Current instant, tagged as UTC"""
        return DateTime(DateTime._now_ticks_raw(), DateKind.utc())

    def ticks(self):
        """100 ns ticks since 1970-01-01T00:00:00Z"""
        return self._ticks

    def millis(self):
        """Milliseconds since the Unix epoch (floored)"""
        return self._ticks // DateTime._TICKS_PER_MS

    def kind(self): return self._kind
    def year(self): return self._year
    def month(self): return self._month
    def day(self): return self._day
    def hour(self): return self._hour
    def min_(self): return self._min
    def sec(self): return self._sec

    def milli_sec(self):
        return self._frac // DateTime._TICKS_PER_MS

    def day_of_week(self):
        """Day of week, 0=Sunday through 6=Saturday"""
        return self._weekday

    def day_of_year(self):
        """Get day of year (1-366)"""
        if DateTime._is_leap_year(self._year):
            return DateTime._DAYS_BEFORE_MONTH_LEAP[self._month - 1] + self._day
        return DateTime._DAYS_BEFORE_MONTH[self._month - 1] + self._day

    def tz_offset_mins(self, tz=None):
        """Minutes to add to local wall time to reach UTC at this instant.

        Positive west of Greenwich, i.e. UTC minus local. Defaults to the
        current time zone. Offsets with leftover seconds (local mean time)
        are truncated toward zero.
        """
        if tz is None:
            from .TimeZone import TimeZone
            tz = TimeZone.cur()
        return -int(tz.offset_secs(self) / 60)

    def plus_millis(self, millis):
        """New DateTime shifted by millis, keeping the kind"""
        if millis == 0:
            return self
        return DateTime(self._ticks + millis * DateTime._TICKS_PER_MS, self._kind)

    def to_iso(self):
        """ISO 8601 form; fraction only when non-zero, 'Z' suffix for UTC kind"""
        s = (f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
             f"T{self._hour:02d}:{self._min:02d}:{self._sec:02d}")
        if self._frac != 0:
            s += "." + f"{self._frac:07d}".rstrip("0")
        if self._kind.is_utc():
            s += "Z"
        return s

    def to_str(self):
        return self.to_iso()

    def __repr__(self):
        return f'DateTime("{self.to_iso()}")'

    def equals(self, that):
        """Instants are equal when their ticks match, regardless of kind"""
        if not isinstance(that, DateTime):
            return False
        return self._ticks == that._ticks

    def compare(self, that):
        if self._ticks < that._ticks:
            return -1
        if self._ticks > that._ticks:
            return 1
        return 0

    def hash_(self):
        return hash(self._ticks)

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash_()

    def is_immutable(self):
        return True
