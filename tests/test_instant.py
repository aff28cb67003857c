import re
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tiny_time import FixedClock, Instant, InvalidInstant, SystemClock

ISO8601_UTC = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+00:00")
REFERENCE_SECONDS = 1771324200  # 2026-02-17T10:30:00Z


def test_instant_normalizes_naive_datetime_to_utc():
    naive = datetime(2025, 1, 1, 12, 0, 0)
    instant = Instant(at=naive)
    assert instant.to_datetime().tzinfo == timezone.utc
    assert instant.to_datetime().hour == 12


def test_instant_converts_aware_datetime_to_utc():
    aware = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    instant = Instant(at=aware)
    assert instant.to_datetime().tzinfo == timezone.utc
    assert instant.to_datetime() == aware.astimezone(timezone.utc)
    assert instant.to_datetime().hour == 10


def test_now_is_utc_and_close_to_current_time():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    instant = Instant.now()
    after = datetime.now(timezone.utc)

    assert instant.to_datetime().tzinfo == timezone.utc
    assert before <= instant.to_datetime() <= after


def test_now_is_non_decreasing():
    first = Instant.now()
    second = Instant.now()
    assert (first.seconds, first.microseconds) <= (second.seconds, second.microseconds)
    assert first <= second


def test_now_keeps_microseconds_from_clock():
    clock = FixedClock(datetime(2026, 2, 17, 10, 30, 0, 123456, tzinfo=timezone.utc))
    instant = Instant.now(clock)
    assert instant.to_unix_seconds() == REFERENCE_SECONDS
    assert instant.microseconds == 123456
    assert instant.to_datetime().microsecond == 123456


def test_now_iso8601_has_no_fractional_seconds():
    assert ISO8601_UTC.fullmatch(Instant.now().to_iso8601())


@pytest.mark.parametrize(
    "value, expected_iso, expected_seconds",
    [
        ("2026-02-17T10:30:00+00:00", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-01-01T00:00:00+00:00", "2026-01-01T00:00:00+00:00", 1767225600),
        ("2026-02-17T23:59:59+00:00", "2026-02-17T23:59:59+00:00", 1771372799),
        ("2026-02-17T16:00:00+05:30", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-17T07:30:00-03:00", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-17T05:30:00-05:00", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-17T19:30:00+09:00", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-17T01:00:00-09:30", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-18T01:00:00+03:00", "2026-02-17T22:00:00+00:00", 1771365600),
        ("2026-02-17T14:00:00+14:00", "2026-02-17T00:00:00+00:00", 1771286400),
        ("2026-02-16T12:00:00-12:00", "2026-02-17T00:00:00+00:00", 1771286400),
        ("2024-02-29T12:00:00+00:00", "2024-02-29T12:00:00+00:00", 1709208000),
        ("2026-02-17 10:30:00", "2026-02-17T10:30:00+00:00", 1771324200),
        ("2026-02-17 10:30:00.123456", "2026-02-17T10:30:00+00:00", 1771324200),
    ],
)
def test_from_string(value, expected_iso, expected_seconds):
    instant = Instant.from_string(value)
    assert instant.to_iso8601() == expected_iso
    assert instant.to_unix_seconds() == expected_seconds


@pytest.mark.parametrize(
    "value",
    [
        "2026-02-17",
        "10:30:00",
        "not-a-date",
        "2026-02-30T10:30:00+00:00",
        "",
        "2026-13-17T10:30:00+00:00",
        "2026-02-17T10:30:00",
        "2026-02-17T10:30:00+00",
        "2026/02/17T10:30:00+00:00",
        "2026-02-17 10:30:00+00:00",
        "2026-02-17T10:30:00Z",
        "2026-02-17T10:30:00.123456+00:00",
        "1771324200",
        "2025-02-29 10:30:00",
        "2026-02-17T24:00:00+00:00",
    ],
)
def test_from_string_rejects_invalid_values(value):
    with pytest.raises(InvalidInstant) as excinfo:
        Instant.from_string(value)
    assert str(excinfo.value) == f"The value <{value}> could not be decoded into a valid instant."
    assert excinfo.value.value == value


def test_from_string_with_z_suffix_references_exact_input():
    with pytest.raises(InvalidInstant, match=re.escape("<2026-02-17T10:30:00Z>")):
        Instant.from_string("2026-02-17T10:30:00Z")


def test_from_string_normalizes_to_utc_datetime():
    moment = Instant.from_string("2026-02-17T15:30:00+05:00").to_datetime()
    assert moment.tzinfo == timezone.utc
    assert moment == datetime(2026, 2, 17, 10, 30, tzinfo=timezone.utc)


def test_from_string_keeps_database_microseconds():
    instant = Instant.from_string("2026-02-17 10:30:00.5")
    assert instant.microseconds == 500000
    assert "." not in instant.to_iso8601()


@pytest.mark.parametrize(
    "value",
    [
        "2026-02-17T16:00:00+05:30",
        "2026-02-18T01:00:00+03:00",
        "1999-12-31T23:59:59-00:30",
        "2026-02-17 10:30:00",
    ],
)
def test_iso8601_output_decodes_back_to_same_instant(value):
    instant = Instant.from_string(value)
    assert Instant.from_string(instant.to_iso8601()) == instant


@pytest.mark.parametrize(
    "seconds, expected_iso",
    [
        (0, "1970-01-01T00:00:00+00:00"),
        (946684800, "2000-01-01T00:00:00+00:00"),
        (86400, "1970-01-02T00:00:00+00:00"),
        (-86400, "1969-12-31T00:00:00+00:00"),
        (-1, "1969-12-31T23:59:59+00:00"),
        (1771324200, "2026-02-17T10:30:00+00:00"),
        (2147483647, "2038-01-19T03:14:07+00:00"),
        (-62135596800, "0001-01-01T00:00:00+00:00"),
        (-62167219200, "0000-01-01T00:00:00+00:00"),
        (253402300800, "10000-01-01T00:00:00+00:00"),
        (2**63 - 1, "292277026596-12-04T15:30:07+00:00"),
    ],
)
def test_from_unix_seconds(seconds, expected_iso):
    instant = Instant.from_unix_seconds(seconds)
    assert instant.to_iso8601() == expected_iso
    assert instant.to_unix_seconds() == seconds
    assert instant.microseconds == 0


def test_from_unix_seconds_accepts_int64_minimum():
    instant = Instant.from_unix_seconds(-(2**63))
    assert instant.to_unix_seconds() == -(2**63)
    assert instant.to_iso8601().startswith("-")
    assert re.fullmatch(r"-\d+-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+00:00", instant.to_iso8601())


def test_from_unix_seconds_matches_from_string():
    from_string = Instant.from_string("2026-02-17T00:00:00+00:00")
    from_unix = Instant.from_unix_seconds(from_string.to_unix_seconds())
    assert from_unix == from_string
    assert from_unix.to_iso8601() == from_string.to_iso8601()


def test_to_unix_seconds_floors_pre_epoch_fractions():
    instant = Instant(at=datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc))
    assert instant.to_unix_seconds() == -1
    assert instant.microseconds == 500000
    assert instant.to_iso8601() == "1969-12-31T23:59:59+00:00"


def test_iso8601_drops_microseconds_without_rounding():
    instant = Instant(at=datetime(2026, 2, 17, 10, 30, 59, 999999, tzinfo=timezone.utc))
    assert instant.to_iso8601() == "2026-02-17T10:30:59+00:00"


def test_to_datetime_outside_supported_years_overflows():
    instant = Instant.from_unix_seconds(253402300800)
    with pytest.raises(OverflowError):
        instant.to_datetime()


def test_instant_is_immutable_and_hashable():
    instant = Instant.from_unix_seconds(0)
    with pytest.raises(ValidationError):
        instant.seconds = 1
    assert {instant, Instant.from_string("1970-01-01 00:00:00")} == {instant}


def test_microseconds_are_bounded():
    with pytest.raises(ValidationError):
        Instant(seconds=0, microseconds=1_000_000)
    with pytest.raises(ValidationError):
        Instant(seconds=0, microseconds=-1)


def test_instants_are_ordered():
    earlier = Instant.from_string("2026-02-17 10:30:00.000001")
    later = Instant.from_string("2026-02-17 10:30:00.000002")
    assert earlier < later
    assert later > earlier
    assert sorted([later, earlier]) == [earlier, later]
    assert str(earlier) == "2026-02-17T10:30:00+00:00"


def test_now_with_system_clock():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    instant = Instant.now(SystemClock())
    assert before <= instant.to_datetime() <= datetime.now(timezone.utc)


def test_now_follows_advanced_fixed_clock():
    clock = FixedClock(datetime(2026, 2, 17, 10, 30))
    first = Instant.now(clock)
    clock.advance(timedelta(microseconds=1))
    second = Instant.now(clock)
    assert first < second
    assert second.microseconds == 1


@pytest.mark.parametrize("moment", ["2025-01-01T12:00:00", None, 1771324200])
def test_instant_rejects_non_datetime_moment(moment):
    with pytest.raises(ValidationError, match="at must be a datetime"):
        Instant(at=moment)
