import pytest

from cocoengine.timer import Timer, TimerManager


def test_one_shot_timer_fires_once_and_finishes():
    calls = []
    timer = Timer(1.0, lambda: calls.append("end"))
    timer.update(0.5)
    assert calls == []
    assert not timer.finished
    timer.update(0.5)
    assert calls == ["end"]
    assert timer.finished
    timer.update(5.0)
    assert calls == ["end"]


def test_looping_timer_fires_repeatedly():
    calls = []
    timer = Timer(1.0, lambda: calls.append(1), loop=True)
    for _ in range(3):
        timer.update(1.0)
    assert len(calls) == 3
    assert not timer.finished
    assert timer.current_time == 0.0


def test_delay_is_consumed_before_counting():
    timer = Timer(1.0, delay=1.0)
    timer.update(0.5)
    assert timer.current_time == 0.0
    timer.update(0.5)
    assert timer.current_time == 0.0
    timer.update(0.25)
    assert timer.current_time == pytest.approx(0.25)


def test_pause_and_play():
    timer = Timer(1.0)
    timer.pause()
    timer.update(0.5)
    assert timer.current_time == 0.0
    timer.play()
    timer.update(0.5)
    assert timer.current_time == pytest.approx(0.5)


def test_tick_callback_receives_delta_and_current():
    ticks = []
    timer = Timer(1.0, on_tick=lambda delta, current: ticks.append((delta, current)))
    timer.update(0.25)
    timer.update(0.25)
    timer.update(1.0)
    assert ticks == [(0.25, 0.25), (0.25, 0.5)]
    assert timer.finished


def test_reset_and_stop_trigger_flags():
    calls = []
    timer = Timer(1.0, lambda: calls.append(1))
    timer.update(0.5)
    timer.reset(True)
    assert calls == [1]
    assert timer.current_time == 0.0
    timer.stop(False)
    assert calls == [1]
    assert timer.finished


def test_manager_removes_finished_timers():
    manager = TimerManager()
    calls = []
    manager.create_timer(1.0, lambda: calls.append("short"))
    manager.create_timer(3.0, lambda: calls.append("long"))
    assert len(manager) == 2
    manager.update_timers(1.0)
    assert calls == ["short"]
    assert len(manager) == 1
    manager.update_timers(2.0)
    assert calls == ["short", "long"]
    assert len(manager) == 0


def test_manager_keeps_looping_timers():
    manager = TimerManager()
    calls = []
    manager.create_timer(0.5, lambda: calls.append(1), loop=True)
    for _ in range(4):
        manager.update_timers(0.5)
    assert len(calls) == 4
    assert len(manager) == 1


def test_timer_created_in_callback_runs_from_next_update():
    manager = TimerManager()
    ticks = []

    def spawn():
        manager.create_continuous_timer(1.0, lambda delta, current: ticks.append(current))

    manager.create_timer(1.0, spawn)
    manager.update_timers(1.0)
    assert len(manager) == 1
    assert ticks == []
    manager.update_timers(0.5)
    assert ticks == [0.5]


def test_continuous_timer_calls_completion():
    manager = TimerManager()
    done = []
    timer = manager.create_continuous_timer(1.0, None, lambda: done.append(True))
    manager.update_timers(1.0)
    assert done == [True]
    assert timer.finished
    assert len(manager) == 0