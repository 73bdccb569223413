from datetime import datetime, timedelta, timezone

import pytest

from punchclock.attendance.classifier import AttendanceClassifier, classify
from punchclock.core.constants import BUSINESS_TZ
from punchclock.core.enums import AttendanceStatus, ClockEventType
from punchclock.core.exceptions import InvalidArgument
from punchclock.shifts.model import ShiftConfig

DEFAULT_SHIFT = ShiftConfig(start_hour=10, start_minute=0, end_hour=19, end_minute=0)


def pht(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2026, 3, 9, hour, minute, second, tzinfo=BUSINESS_TZ)


def test_clock_in_before_start_is_early_and_credited_from_start():
    result = classify("clockIn", pht(9, 45), DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.EARLY
    assert result.effective_timestamp == pht(10, 0)
    assert result.is_overtime is False


@pytest.mark.parametrize("hm", [(10, 0), (10, 1), (13, 30), (23, 59)])
def test_clock_in_at_or_after_start_is_on_time(hm):
    now = pht(*hm)
    result = classify(ClockEventType.CLOCK_IN, now, DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.effective_timestamp == now


def test_clock_in_compares_minutes_when_hours_match():
    shift = ShiftConfig(start_hour=8, start_minute=30, end_hour=17, end_minute=30)

    assert classify("clockIn", pht(8, 29, 59), shift).status == AttendanceStatus.EARLY
    assert classify("clockIn", pht(8, 30, 0), shift).status == AttendanceStatus.ON_TIME
    assert classify("clockIn", pht(8, 30, 0), shift).effective_timestamp == pht(8, 30)


@pytest.mark.parametrize("hm", [(8, 0), (18, 59), (19, 0)])
def test_clock_out_at_or_before_end_is_on_time(hm):
    now = pht(*hm)
    result = classify("clockOut", now, DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.effective_timestamp == now
    assert result.is_overtime is False


def test_clock_out_seconds_past_end_minute_is_still_on_time():
    result = classify("clockOut", pht(19, 0, 45), DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.ON_TIME


@pytest.mark.parametrize("minutes_after", [1, 30, 59, 60])
def test_clock_out_within_grace_period_is_late_and_credited_at_end(minutes_after):
    now = pht(19, 0) + timedelta(minutes=minutes_after)
    result = classify("clockOut", now, DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.LATE
    assert result.effective_timestamp == pht(19, 0)
    assert result.is_overtime is False


@pytest.mark.parametrize("minutes_after", [61, 65, 240])
def test_clock_out_past_grace_period_is_overtime(minutes_after):
    now = pht(19, 0) + timedelta(minutes=minutes_after)
    result = classify("clockOut", now, DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.OVERTIME
    assert result.is_overtime is True
    assert result.effective_timestamp == now


def test_documented_scenarios():
    assert classify("clockIn", pht(9, 45), DEFAULT_SHIFT).effective_timestamp == pht(10, 0)

    out_overtime = classify("clockOut", pht(20, 5), DEFAULT_SHIFT)
    assert (out_overtime.status, out_overtime.is_overtime) == (AttendanceStatus.OVERTIME, True)
    assert out_overtime.effective_timestamp == pht(20, 5)

    out_late = classify("clockOut", pht(19, 30), DEFAULT_SHIFT)
    assert out_late.status == AttendanceStatus.LATE
    assert out_late.effective_timestamp == pht(19, 0)


def test_instants_are_converted_to_business_time():
    # 01:45 UTC is 09:45 in Manila.
    now = datetime(2026, 3, 9, 1, 45, tzinfo=timezone.utc)
    result = classify("clockIn", now, DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.EARLY
    assert result.effective_timestamp == pht(10, 0)
    assert result.effective_timestamp.utcoffset() == timedelta(hours=8)


def test_business_date_is_used_for_effective_timestamp():
    # 16:30 UTC on the 8th is already 00:30 on the 9th in Manila.
    now = datetime(2026, 3, 8, 16, 30, tzinfo=timezone.utc)
    result = classify("clockIn", now, DEFAULT_SHIFT)

    assert result.effective_timestamp == pht(10, 0)


def test_naive_datetimes_are_read_as_business_wall_clock():
    result = classify("clockOut", datetime(2026, 3, 9, 19, 30), DEFAULT_SHIFT)

    assert result.status == AttendanceStatus.LATE
    assert result.effective_timestamp == pht(19, 0)


def test_missing_shift_config_uses_default_window():
    assert classify("clockIn", pht(9, 59)).status == AttendanceStatus.EARLY
    assert classify("clockOut", pht(20, 1)).status == AttendanceStatus.OVERTIME


def test_malformed_shift_values_fall_back_to_defaults():
    stored = {"start_hour": "abc", "start_minute": None, "end_hour": 99, "end_minute": -5}
    result = classify("clockOut", pht(19, 30), stored)

    assert result.status == AttendanceStatus.LATE
    assert result.effective_timestamp == pht(19, 0)


@pytest.mark.parametrize("bad", ["lunch", "", None, "CLOCKIN", 3])
def test_unknown_event_type_is_rejected(bad):
    with pytest.raises(InvalidArgument):
        classify(bad, pht(10, 0), DEFAULT_SHIFT)


def test_classifier_uses_injected_factory_threshold():
    from punchclock.attendance.factory import AttendanceStrategyFactory

    classifier = AttendanceClassifier(AttendanceStrategyFactory(overtime_threshold_minutes=31))

    assert classifier.classify("clockOut", pht(19, 30), DEFAULT_SHIFT).status == AttendanceStatus.LATE
    assert classifier.classify("clockOut", pht(19, 31), DEFAULT_SHIFT).status == AttendanceStatus.OVERTIME
