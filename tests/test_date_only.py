from __future__ import annotations

from datetime import date

import pytest

from dateonly import ArgErr, DateKind, DateOnly, DateTime, UnsupportedErr


def _ymd(d: DateOnly) -> tuple[int, int, int]:
    return (d.year(), d.month(), d.day())


def test_make_exposes_fields() -> None:
    d = DateOnly.make(2024, 3, 5)

    assert _ymd(d) == (2024, 3, 5)
    assert d.day_of_week() == 2  # Tuesday
    assert d.day_of_year() == 65


def test_make_keeps_small_years_literal() -> None:
    assert DateOnly.make(50, 6, 15).year() == 50
    assert DateOnly.make(1, 1, 1).year() == 1
    assert DateOnly.make(99, 12, 31).to_iso() == "0099-12-31"


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(0, 1, 1), (10000, 1, 1), (2024, 0, 1), (2024, 13, 1), (2023, 2, 29), (2024, 4, 31), (2024, 1, 0)],
)
def test_make_rejects_out_of_range_fields(year: int, month: int, day: int) -> None:
    with pytest.raises(ArgErr):
        DateOnly.make(year, month, day)


def test_min_val() -> None:
    d = DateOnly.min_val()

    assert _ymd(d) == (1, 1, 1)
    assert d.day_of_week() == 1  # Monday
    assert d.day_of_year() == 1
    assert d is DateOnly.min_val()


def test_max_val() -> None:
    d = DateOnly.max_val()

    assert _ymd(d) == (9999, 12, 31)
    assert d.day_of_week() == 5  # Friday
    assert d.day_of_year() == 365


def test_day_number_is_relative_to_unix_epoch() -> None:
    assert DateOnly.make(1970, 1, 1).day_number() == 0
    assert DateOnly.make(1969, 12, 31).day_number() == -1
    assert DateOnly.make(2000, 1, 1).day_number() == 10957
    assert DateOnly.min_val().day_number() == -719162
    assert DateOnly.max_val().day_number() == 2932896


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(1, 1, 1), (50, 6, 15), (1600, 2, 29), (1969, 12, 31), (2000, 2, 29), (2024, 3, 5), (9999, 12, 31)],
)
def test_day_number_round_trip(year: int, month: int, day: int) -> None:
    d = DateOnly.make(year, month, day)

    assert _ymd(DateOnly.from_day_number(d.day_number())) == (year, month, day)


def test_from_day_number_rejects_out_of_range() -> None:
    with pytest.raises(ArgErr):
        DateOnly.from_day_number(-719163)
    with pytest.raises(ArgErr):
        DateOnly.from_day_number(2932897)


def test_plus_days_and_minus_date() -> None:
    d = DateOnly.make(2023, 12, 30)

    assert _ymd(d.plus_days(3)) == (2024, 1, 2)
    assert _ymd(d.plus_days(-365)) == (2022, 12, 30)
    assert d.plus_days(0) is d
    assert DateOnly.make(2024, 3, 1).minus_date(DateOnly.make(2024, 2, 1)) == 29


def test_from_date_time_drops_time_of_day() -> None:
    dt = DateTime.make_utc(2024, 3, 5, 23, 59, 59, 999)

    assert DateOnly.from_date_time(dt) == DateOnly.make(2024, 3, 5)


def test_py_date_conversion() -> None:
    d = DateOnly.from_py(date(1999, 12, 31))

    assert _ymd(d) == (1999, 12, 31)
    assert d.to_py() == date(1999, 12, 31)


def test_today_uses_clock(clock_at) -> None:
    assert DateOnly.today(clock_at(2024, 2, 29)) == DateOnly.make(2024, 2, 29)


def test_today_reads_local_wall_date(zone) -> None:
    zone("Asia/Tokyo")
    # 2024-03-05T20:00Z is already March 6th in Tokyo
    instant = DateTime.make_ticks(DateTime.make_utc(2024, 3, 5, 20).ticks(), DateKind.local())

    assert DateOnly.today(lambda: instant) == DateOnly.make(2024, 3, 6)


def test_to_date_time_utc_adds_time_of_day() -> None:
    dt = DateOnly.make(2024, 3, 5).to_date_time(90 * 60_000, DateKind.utc())

    assert dt.kind() is DateKind.utc()
    assert (dt.year(), dt.month(), dt.day(), dt.hour(), dt.min_()) == (2024, 3, 5, 1, 30)


def test_to_date_time_local_compensates_zone_offset(zone) -> None:
    zone("America/New_York")

    dt = DateOnly.make(2024, 1, 15).to_date_time(0, DateKind.local())

    # local midnight in New York (EST, UTC-5) is 05:00 UTC
    assert dt.kind() is DateKind.local()
    assert (dt.day(), dt.hour()) == (15, 5)


def test_to_date_time_defaults_to_unspecified_kind(zone) -> None:
    zone("UTC")

    dt = DateOnly.make(2024, 1, 15).to_date_time()

    assert dt.kind() is DateKind.unspecified()
    assert dt == DateTime.make_utc(2024, 1, 15)


@pytest.mark.parametrize("name", ["Asia/Tokyo", "America/New_York", "Australia/Lord_Howe"])
@pytest.mark.parametrize("kind", [DateKind.local(), DateKind.unspecified()])
def test_to_date_time_and_back_keeps_the_date(zone, name: str, kind: DateKind) -> None:
    zone(name)

    for d in (DateOnly.make(2024, 3, 5), DateOnly.make(2024, 7, 15)):
        for time_ms in (0, 12 * 3_600_000, 23 * 3_600_000 + 59 * 60_000):
            assert DateOnly.from_date_time(d.to_date_time(time_ms, kind)) == d


def test_from_date_time_reads_local_wall_date(zone) -> None:
    zone("Asia/Tokyo")
    # 2024-03-05T20:00Z is 05:00 on March 6th in Tokyo
    ticks = DateTime.make_utc(2024, 3, 5, 20).ticks()

    assert DateOnly.from_date_time(DateTime.make_ticks(ticks, DateKind.utc())) == DateOnly.make(2024, 3, 5)
    assert DateOnly.from_date_time(DateTime.make_ticks(ticks, DateKind.local())) == DateOnly.make(2024, 3, 6)


def test_to_date_time_at_min_val_east_of_utc(zone) -> None:
    zone("Asia/Tokyo")

    dt = DateOnly.min_val().to_date_time()

    # local midnight on 0001-01-01 in Tokyo is still year 0 in UTC
    assert (dt.year(), dt.month(), dt.day()) == (0, 12, 31)
    assert DateOnly.from_date_time(dt) == DateOnly.min_val()


def test_to_date_time_at_max_val_west_of_utc(zone) -> None:
    zone("America/New_York")

    dt = DateOnly.max_val().to_date_time(20 * 3_600_000, DateKind.local())

    assert (dt.year(), dt.month(), dt.day(), dt.hour()) == (10000, 1, 1, 1)
    assert DateOnly.from_date_time(dt) == DateOnly.max_val()


def test_to_str_formats() -> None:
    d = DateOnly.make(2024, 3, 5)

    assert d.to_str("d") == "03/05/2024"
    assert d.to_str("o") == "2024-03-05"
    assert d.to_str("O") == "2024-03-05"
    assert d.to_str() == "03/05/2024"
    assert str(d) == "03/05/2024"
    assert repr(d) == 'DateOnly("2024-03-05")'
    assert DateOnly.min_val().to_str("d") == "01/01/0001"


@pytest.mark.parametrize("fmt", ["D", "yyyy-MM-dd", "", "s"])
def test_to_str_rejects_custom_formats(fmt: str) -> None:
    with pytest.raises(UnsupportedErr) as exc_info:
        DateOnly.make(2024, 3, 5).to_str(fmt)

    assert exc_info.value.msg() == "Custom formats are not supported"


@pytest.mark.parametrize(("year", "month", "day"), [(1, 1, 1), (50, 6, 15), (2024, 2, 29), (9999, 12, 31)])
def test_iso_output_reads_back_with_iso_parser(year: int, month: int, day: int) -> None:
    d = DateOnly.make(year, month, day)

    assert date.fromisoformat(d.to_str("o")) == date(year, month, day)


@pytest.mark.parametrize(("year", "month", "day"), [(1, 1, 1), (50, 6, 15), (999, 12, 31), (2024, 3, 5), (9999, 12, 31)])
def test_short_date_output_reads_back_with_parse(year: int, month: int, day: int) -> None:
    d = DateOnly.make(year, month, day)

    assert DateOnly.parse(d.to_str("d")) == d


def test_equality_ordering_and_hash() -> None:
    a = DateOnly.make(2024, 3, 5)
    b = DateOnly(2024, 3, 5)
    c = DateOnly.make(2024, 3, 6)

    assert a == b
    assert a != c
    assert a < c
    assert c >= b
    assert len({a, b, c}) == 2
    assert sorted([c, DateOnly.min_val(), a]) == [DateOnly.min_val(), a, c]
    assert a != "2024-03-05"
