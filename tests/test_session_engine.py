import random

import pytest

from core.session_engine import SessionEngine
from domain.models import TimerStatus


def test_defaults():
    engine = SessionEngine()
    s = engine.snapshot()
    assert (s.count, s.total_sets, s.rest_duration_ms) == (0, 10, 60000)
    assert s.timer_text == "01:00"
    assert s.timer_status == TimerStatus.IDLE


def test_increment_starts_running():
    engine = SessionEngine()
    gen = engine.increment()
    s = engine.snapshot()
    assert s.count == 1
    assert s.timer_status == TimerStatus.RUNNING
    assert s.remaining_ms == 60000
    assert gen == engine.countdown_gen


def test_each_increment_issues_new_generation():
    engine = SessionEngine()
    g1 = engine.increment()
    g2 = engine.increment()
    assert g2 > g1
    assert not engine.tick(g1, 30000)
    assert engine.elapse(g1) is None
    assert engine.snapshot().timer_status == TimerStatus.RUNNING


def test_decrement_at_zero_is_noop():
    engine = SessionEngine()
    before = engine.snapshot()
    assert engine.decrement() is False
    assert engine.snapshot() is before


def test_decrement_stops_countdown():
    engine = SessionEngine()
    gen = engine.increment()
    engine.tick(gen, 42000)
    assert engine.decrement()
    s = engine.snapshot()
    assert s.count == 0
    assert s.timer_status == TimerStatus.IDLE
    assert s.remaining_ms == 60000
    assert engine.elapse(gen) is None


def test_count_never_negative():
    engine = SessionEngine()
    rng = random.Random(7)
    for _ in range(500):
        if rng.random() < 0.4:
            engine.increment()
        else:
            engine.decrement()
        assert engine.snapshot().count >= 0


def test_tick_clamps_to_duration():
    engine = SessionEngine(rest_duration_ms=5000)
    gen = engine.increment()
    engine.tick(gen, 9000)
    assert engine.snapshot().remaining_ms == 5000


def test_configure_timer_resets_display():
    engine = SessionEngine()
    gen = engine.increment()
    engine.configure_timer(90000)
    s = engine.snapshot()
    assert s.timer_status == TimerStatus.IDLE
    assert s.remaining_ms == 90000
    assert s.timer_text == "01:30"
    assert not engine.tick(gen, 1000)


def test_configure_sets_keeps_status():
    engine = SessionEngine()
    engine.increment()
    engine.configure_sets(5)
    s = engine.snapshot()
    assert s.total_sets == 5
    assert s.timer_status == TimerStatus.RUNNING


@pytest.mark.parametrize("bad", [0, 100, -3])
def test_configure_sets_rejects(bad):
    with pytest.raises(ValueError):
        SessionEngine().configure_sets(bad)


def test_configure_timer_rejects_negative():
    with pytest.raises(ValueError):
        SessionEngine().configure_timer(-1)


def test_elapse_then_auto_dismiss():
    engine = SessionEngine()
    gen = engine.increment()
    dgen = engine.elapse(gen)
    s = engine.snapshot()
    assert s.timer_status == TimerStatus.FINISHED
    assert s.notification_visible
    assert s.timer_text == "00:00"

    assert engine.auto_dismiss(dgen)
    s = engine.snapshot()
    assert not s.notification_visible
    assert s.timer_status == TimerStatus.IDLE


def test_stale_auto_dismiss_keeps_newer_notification():
    engine = SessionEngine()
    first = engine.elapse(engine.increment())
    engine.dismiss()
    engine.elapse(engine.increment())

    assert not engine.auto_dismiss(first)
    assert engine.snapshot().notification_visible


def test_increment_hides_notification():
    engine = SessionEngine()
    dgen = engine.elapse(engine.increment())
    engine.increment()
    s = engine.snapshot()
    assert not s.notification_visible
    assert s.timer_status == TimerStatus.RUNNING
    assert not engine.auto_dismiss(dgen)


def test_load_count():
    engine = SessionEngine()
    engine.load_count(4)
    assert engine.snapshot().count == 4
    engine.load_count(-2)
    assert engine.snapshot().count == 0
