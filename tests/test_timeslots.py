import pytest

from party_booking.core.errors import MalformedTimeValue
from party_booking.services.timeslots import (
    MIDNIGHT,
    TimeOfDay,
    TimeRange,
    contains,
    format_hhmm,
    overlaps,
    parse_range,
    parse_time,
    time_or_midnight,
    to_minutes,
)


def r(text: str) -> TimeRange:
    return parse_range(text)


def test_parse_time_ignores_seconds():
    assert parse_time("14:30").value == parse_time("14:30:00").value == TimeOfDay(14, 30)


@pytest.mark.parametrize("text", ["garbage", "", "14", "ab:30", "14:xx", "24:00", "12:60", None, 1430])
def test_parse_time_reports_failure(text):
    result = parse_time(text)
    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, MalformedTimeValue)


def test_time_or_midnight_falls_back(caplog):
    assert time_or_midnight("garbage") == MIDNIGHT == TimeOfDay(0)
    assert "Malformed time" in caplog.text
    assert time_or_midnight("09:15") == TimeOfDay(9, 15)


def test_to_minutes():
    assert to_minutes(TimeOfDay(0)) == 0
    assert to_minutes(TimeOfDay(14, 30)) == 870
    assert to_minutes(TimeOfDay(23, 59)) == 1439


def test_format_hhmm_truncates():
    assert format_hhmm("14:30:00") == "14:30"
    assert format_hhmm("14:00-17:00") == "14:00"
    assert format_hhmm("9:00") == "9:00"


def test_parse_range_keeps_label():
    slot = r("10:00-13:00")
    assert slot.start == TimeOfDay(10) and slot.end == TimeOfDay(13)
    assert slot.label == "10:00-13:00"
    assert str(slot) == "10:00-13:00"
    assert not slot.is_point


def test_parse_range_accepts_seconds_and_points():
    assert r("10:00:00-13:00:00") == r("10:00-13:00")
    point = r("15:00")
    assert point.is_point and point.start == TimeOfDay(15)


@pytest.mark.parametrize("text", ["", "10:00-", "xx-13:00", "13:00-10:00", None])
def test_parse_range_rejects_bad_input(text):
    with pytest.raises(MalformedTimeValue):
        parse_range(text)


@pytest.mark.parametrize(
    "a,b",
    [
        ("10:00-13:00", "12:30-14:30"),
        ("14:00-17:00", "12:30-14:30"),
        ("09:00-10:00", "10:00-11:00"),
        ("08:00-20:00", "10:00-11:00"),
        ("10:00-11:00", "11:30-12:00"),
    ],
)
def test_overlap_is_symmetric(a, b):
    assert overlaps(r(a), r(b)) == overlaps(r(b), r(a))


def test_range_overlaps_itself():
    for text in ["00:00-23:59", "10:00-10:01", "14:00-17:00"]:
        assert overlaps(r(text), r(text))


def test_touching_ranges_do_not_overlap():
    assert not overlaps(r("09:00-10:00"), r("10:00-11:00"))


def test_zero_length_never_overlaps():
    assert not overlaps(r("10:00"), r("09:00-11:00"))
    assert not overlaps(r("10:00"), r("10:00"))


def test_contains_is_half_open():
    slot = r("10:00-13:00")
    assert contains(slot, TimeOfDay(10))
    assert contains(slot, TimeOfDay(12, 59))
    assert not contains(slot, TimeOfDay(13))
    assert not contains(slot, TimeOfDay(9, 59))


@pytest.mark.parametrize("text", ["¹¹:00", "11:²⁰", "١١:٠٠", "１１:００"])
def test_non_ascii_digits_are_a_failed_parse(text):
    result = parse_time(text)
    assert not result.ok
    assert result.error.reason == "hour and minute must be numeric"
