#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re
from datetime import date as py_date

from .Obj import Obj
from .DateKind import DateKind
from .DateTime import DateTime
from .Err import ArgErr, ParseErr, UnsupportedErr
from .Log import Log


class DateOnly(Obj):
    """DateOnly represents a calendar day without time-of-day or timezone.

    The value is backed by a DateTime at UTC midnight and spans
    0001-01-01 through 9999-12-31.
    """

    _TICKS_PER_DAY = 864_000_000_000

    # Allowed separators: . , - /
    #
    # Allowed forms:
    #   yyyy/mm/dd
    #   mm/dd/yyyy
    #   mm/dd
    #   mm/yyyy
    #   yyyy/mm
    _PATTERN = re.compile(
        r"\s*([0-9]{1,4})"
        r"(?:\s*[.,\-/]\s*([0-9]{1,2}))?"
        r"\s*[.,\-/]\s*([0-9]{1,4})\s*"
    )

    _FORMATS = ("d", "o", "O")

    _min = None
    _max = None

    def __init__(self, year_or_str, month=1, day=1):
        super().__init__()
        # Handle string constructor: DateOnly("12/30/2024")
        if isinstance(year_or_str, str):
            parsed = DateOnly.parse(year_or_str)
        else:
            parsed = DateOnly.make(year_or_str, month, day)
        self._instant = parsed._instant

    @staticmethod
    def _from_instant(instant):
        """Wrap a UTC-midnight DateTime without going through __init__"""
        result = DateOnly.__new__(DateOnly)
        Obj.__init__(result)
        result._instant = instant
        return result

    @staticmethod
    def _log():
        return Log.get("dateonly")

    # Construction and limits

    @staticmethod
    def make(year, month=1, day=1):
        """Create a DateOnly from calendar fields.

        Years 1-99 are kept as given, never widened to 19xx or 20xx.
        Raises ArgErr when a field is out of range.
        """
        return DateOnly._from_instant(DateTime.make_utc(year, month, day))

    @staticmethod
    def max_val():
        """9999-12-31"""
        if DateOnly._max is None:
            DateOnly._max = DateOnly._from_instant(DateTime.from_millis(253402214400000))
        return DateOnly._max

    @staticmethod
    def min_val():
        """0001-01-01"""
        if DateOnly._min is None:
            DateOnly._min = DateOnly._from_instant(DateTime.from_millis(-62135596800000))
        return DateOnly._min

    @staticmethod
    def from_date_time(dt):
        """Date part of a DateTime.

        UTC instants give their UTC date; local and unspecified ones give
        the date on the current zone's wall clock, which undoes to_date_time.
        """
        wall = DateOnly._wall_time(dt)
        return DateOnly.make(wall.year(), wall.month(), wall.day())

    @staticmethod
    def from_py(d):
        """Create from a datetime.date (or datetime.datetime, whose time is dropped)"""
        return DateOnly.make(d.year, d.month, d.day)

    @staticmethod
    def today(clock=None):
        """Current date on the local wall clock"""
        return DateOnly.from_date_time((clock or DateTime.now)())

    @staticmethod
    def _wall_time(dt):
        """dt with non-UTC instants shifted onto local wall time"""
        if dt.kind().is_utc():
            return dt
        return dt.plus_millis(-dt.tz_offset_mins() * 60_000)

    # Day numbers

    def day_number(self):
        """Whole days since 1970-01-01"""
        return self._instant.ticks() // DateOnly._TICKS_PER_DAY

    @staticmethod
    def from_day_number(day_number):
        """Inverse of day_number(); raises ArgErr outside 0001-01-01..9999-12-31"""
        if day_number < DateOnly.min_val().day_number() or day_number > DateOnly.max_val().day_number():
            raise ArgErr.make(f"Day number out of range: {day_number}")
        ticks = day_number * DateOnly._TICKS_PER_DAY
        return DateOnly._from_instant(DateTime.make_ticks(ticks, DateKind.utc()))

    def plus_days(self, days):
        if days == 0:
            return self
        return DateOnly.from_day_number(self.day_number() + days)

    def minus_date(self, that):
        """Number of days from that to this"""
        return self.day_number() - that.day_number()

    # Fields

    def day(self): return self._instant.day()
    def month(self): return self._instant.month()
    def year(self): return self._instant.year()

    def day_of_week(self):
        """0=Sunday through 6=Saturday"""
        return self._instant.day_of_week()

    def day_of_year(self):
        """Get day of year (1-366)"""
        return self._instant.day_of_year()

    def to_date_time(self, time_ms=0, kind=None):
        """Combine with a time of day given in milliseconds since midnight.

        The date is stored at UTC midnight whatever the kind, so for local and
        unspecified kinds the current zone's offset is added to land on the
        same wall-clock time. Such results may fall up to a day outside the
        UTC range, which DateTime allows for non-UTC kinds.
        """
        if kind is None:
            kind = DateKind.unspecified()
        offset_ms = 0
        if not kind.is_utc():
            offset_ms = self._instant.tz_offset_mins() * 60_000
        return DateTime.from_millis(self._instant.millis() + time_ms + offset_ms, kind)

    def to_py(self):
        return py_date(self.year(), self.month(), self.day())

    # Formatting

    def to_str(self, format="d"):
        """Format as "d" (MM/DD/YYYY) or "o"/"O" (YYYY-MM-DD)"""
        if format not in DateOnly._FORMATS:
            raise UnsupportedErr.make("Custom formats are not supported")

        y = f"{self.year():04d}"
        m = f"{self.month():02d}"
        d = f"{self.day():02d}"

        return f"{m}/{d}/{y}" if format == "d" else f"{y}-{m}-{d}"

    def to_iso(self):
        return self.to_str("o")

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return f'DateOnly("{self.to_iso()}")'

    # Parsing

    @staticmethod
    def parse(s, clock=None):
        """Parse a numeric date string, raising ParseErr when it is not one.

        Two fields of at most two digits each read as month/day in the current
        year, taken from clock (a callable returning a DateTime, default
        DateTime.now). Otherwise the field lengths decide which one is the
        year; a one or two digit year in the three field form maps 00-29 to
        2000-2029 and 30-99 to 1930-1999. Missing days default to 1.
        """
        r = DateOnly._PATTERN.fullmatch(s) if isinstance(s, str) else None
        if r is None:
            raise ParseErr.make_str("DateOnly", s)

        g1, g2, g3 = r.groups()
        y = 0
        m = 0
        d = 1

        if g2 is None:
            if len(g1) < 3:
                if len(g3) < 3:
                    # 12/30 = December 30, {CurrentYear}
                    y = DateOnly._wall_time((clock or DateTime.now)()).year()
                    m = int(g1)
                    d = int(g3)
                else:
                    # 12/2000 = December 1, 2000
                    m = int(g1)
                    y = int(g3)
            else:
                if len(g3) > 2:
                    raise ParseErr.make_str("DateOnly", s)

                # 2000/12 = December 1, 2000
                y = int(g1)
                m = int(g3)
        else:
            # 2000/1/30 or 1/30/2000
            year_first = len(g1) > 2
            y_str = g1 if year_first else g3
            y = int(y_str)

            # year 0-29 is 2000-2029, 30-99 is 1930-1999
            if len(y_str) < 3:
                y += 1900 if y >= 30 else 2000

            if year_first:
                m, d = int(g2), int(g3)
            else:
                m, d = int(g1), int(g2)

        if y > 0 and 0 < m < 13 and 0 < d <= DateTime.days_in_month(y, m):
            return DateOnly.make(y, m, d)

        raise ParseErr.make_str("DateOnly", s)

    @staticmethod
    def from_str(s, checked=True, clock=None):
        """Parse s; when checked is False return None instead of raising"""
        try:
            return DateOnly.parse(s, clock)
        except ParseErr:
            if checked:
                raise
            return None

    @staticmethod
    def try_parse(s, ref, clock=None):
        """Parse s into ref and return True, or return False leaving ref untouched"""
        try:
            ref.set(DateOnly.parse(s, clock))
            return True
        except (ParseErr, ArgErr) as e:
            DateOnly._log().debug(f"try_parse rejected {s!r}: {e.msg()}")
            return False

    # Identity

    def equals(self, that):
        if not isinstance(that, DateOnly):
            return False
        return self._instant.ticks() == that._instant.ticks()

    def compare(self, that):
        return self._instant.compare(that._instant)

    def hash_(self):
        return hash(self._instant.ticks())

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash_()

    def is_immutable(self):
        return True
