import pytest

from punchclock.core.exceptions import ValidationError
from punchclock.shifts.model import ShiftConfig
from punchclock.shifts.service import ShiftConfigService


def test_defaults_are_ten_to_seven():
    cfg = ShiftConfig()

    assert (cfg.start_hour, cfg.start_minute, cfg.end_hour, cfg.end_minute) == (10, 0, 19, 0)
    assert cfg.label() == "10:00 - 19:00"


def test_coerce_defaults_each_bad_component_separately():
    cfg = ShiftConfig.coerce(start_hour=8, start_minute="x", end_hour=24, end_minute="45")

    assert cfg == ShiftConfig(start_hour=8, start_minute=0, end_hour=19, end_minute=45)


def test_coerce_keeps_zero_values():
    cfg = ShiftConfig.coerce(start_hour=0, start_minute=0, end_hour=8, end_minute=0)

    assert cfg.start_hour == 0
    assert cfg.end_hour == 8


def test_from_mapping_handles_missing_data():
    assert ShiftConfig.from_mapping(None) == ShiftConfig()
    assert ShiftConfig.from_mapping({"end_hour": 18}) == ShiftConfig(end_hour=18)


def test_validated_rejects_end_before_or_equal_start():
    with pytest.raises(ValidationError):
        ShiftConfig.validated(start_hour=18, start_minute=0, end_hour=9, end_minute=0)
    with pytest.raises(ValidationError):
        ShiftConfig.validated(start_hour=9, start_minute=0, end_hour=9, end_minute=0)


@pytest.mark.parametrize(
    "values",
    [
        {"start_hour": 24, "start_minute": 0, "end_hour": 19, "end_minute": 0},
        {"start_hour": 9, "start_minute": 60, "end_hour": 19, "end_minute": 0},
        {"start_hour": "nine", "start_minute": 0, "end_hour": 19, "end_minute": 0},
        {"start_hour": 9, "start_minute": 0, "end_hour": None, "end_minute": 0},
    ],
)
def test_validated_rejects_bad_components(values):
    with pytest.raises(ValidationError):
        ShiftConfig.validated(**values)


def test_service_returns_default_when_absent():
    class Empty:
        def get_for_user(self, user_id):
            return None

    assert ShiftConfigService(Empty()).get_shift_config(7) == ShiftConfig()
