import pytest

from src.checkin_system.checkin_system.core.enums import ShiftType
from src.checkin_system.checkin_system.shifts.classifier import classify_shift


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("14:00", "22:00", ShiftType.AFTERNOON),
        ("22:00", "06:00", ShiftType.NIGHT),
        ("02:00", "10:00", ShiftType.MORNING),
        ("08:00", "17:00", ShiftType.MORNING),
        ("06:00", "18:00", ShiftType.MORNING),
        ("12:00", "20:00", ShiftType.AFTERNOON),
        ("18:00", "21:00", ShiftType.AFTERNOON),
        ("18:00", "23:00", ShiftType.NIGHT),
        ("02:00", "19:00", ShiftType.NIGHT),
        ("07:00", "20:00", ShiftType.MORNING),
        ("13:00", "23:00", ShiftType.AFTERNOON),
        ("00:00", "04:00", ShiftType.MORNING),
        ("05:00", "05:00", ShiftType.MORNING),
        ("19:00", "07:00", ShiftType.NIGHT),
    ],
)
def test_classify_with_end_time(start, end, expected):
    assert classify_shift(start, end) == expected


@pytest.mark.parametrize(
    "start,expected",
    [
        ("05:59", ShiftType.NIGHT),
        ("06:00", ShiftType.MORNING),
        ("11:59", ShiftType.MORNING),
        ("12:00", ShiftType.AFTERNOON),
        ("17:59", ShiftType.AFTERNOON),
        ("18:00", ShiftType.NIGHT),
        ("00:00", ShiftType.NIGHT),
    ],
)
def test_classify_by_start_only(start, expected):
    assert classify_shift(start) == expected


def test_no_start_time_is_flexible():
    assert classify_shift(None) == ShiftType.FLEXIBLE
    assert classify_shift("", "10:00") == ShiftType.FLEXIBLE


def _by_start(start_hour):
    if 6 <= start_hour < 12:
        return ShiftType.MORNING
    if 12 <= start_hour < 18:
        return ShiftType.AFTERNOON
    return ShiftType.NIGHT


def test_every_hour_combination():
    for start_hour in range(24):
        for end_hour in range(24):
            result = classify_shift(f"{start_hour:02d}:00", f"{end_hour:02d}:00")
            assert result != ShiftType.FLEXIBLE

            if start_hour > end_hour:
                assert result == ShiftType.NIGHT, (start_hour, end_hour)
            elif end_hour < 18 or (4 <= start_hour < 12 and 12 <= end_hour <= 18):
                expected = ShiftType.MORNING if start_hour < 12 else ShiftType.AFTERNOON
                assert result == expected, (start_hour, end_hour)
            elif start_hour >= 12 and end_hour < 22:
                assert result == ShiftType.AFTERNOON, (start_hour, end_hour)
            elif start_hour >= 18:
                assert result == ShiftType.NIGHT, (start_hour, end_hour)
            else:
                assert result == _by_start(start_hour), (start_hour, end_hour)
