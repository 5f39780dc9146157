import pytest

from core.wheel import MIDDLE_INDEX, WheelModel


def test_initial_index_selects_value():
    wheel = WheelModel(size=60)
    first = wheel.first_index_for(7)
    assert wheel.selected_value(first) == 7


def test_wraps_around():
    wheel = WheelModel(size=60)
    assert wheel.value_at(MIDDLE_INDEX - 1) == 59
    assert wheel.value_at(MIDDLE_INDEX + 60) == 0


def test_seconds_wheel_display():
    wheel = WheelModel(size=4, multiplier=15)
    assert [wheel.display_value(MIDDLE_INDEX + i) for i in range(4)] == [
        "00",
        "15",
        "30",
        "45",
    ]


def test_snap_uses_threshold():
    wheel = WheelModel(size=60, snap_threshold=25)
    assert wheel.snap(100, -26) == 101
    assert wheel.snap(100, -25) == 100
    assert wheel.snap(100, 0) == 100


def test_snap_threshold_is_configurable():
    wheel = WheelModel(size=60, item_height=40, snap_threshold=10)
    assert wheel.snap(100, -11) == 101


def test_rejects_bad_threshold():
    with pytest.raises(ValueError):
        WheelModel(size=4, item_height=50, snap_threshold=60)
