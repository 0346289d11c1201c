"""Countdown timers, optionally looping, with per-tick callbacks."""

from __future__ import annotations

from typing import Callable, List, Optional

EndCallback = Callable[[], None]
TickCallback = Callable[[float, float], None]


class Timer:
    """Counts up to ``target_time`` after an initial ``delay``, then fires ``on_end``."""

    def __init__(
        self,
        target_time: float,
        on_end: Optional[EndCallback] = None,
        delay: float = 0.0,
        loop: bool = False,
        on_tick: Optional[TickCallback] = None,
    ):
        self.target_time = target_time
        self.on_end = on_end
        self.on_tick = on_tick
        self.delay = delay
        self.looping = loop
        self.playing = True
        self.finished = False
        self.current_time = 0.0

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def reset(self, trigger: bool) -> None:
        """Restart counting; call the end callback when ``trigger`` is set."""
        self.current_time = 0.0
        if trigger and self.on_end is not None:
            self.on_end()

    def stop(self, trigger: bool) -> None:
        """Mark the timer finished; call the end callback when ``trigger`` is set."""
        self.finished = True
        if trigger and self.on_end is not None:
            self.on_end()

    def update(self, delta: float) -> None:
        if self.finished or not self.playing:
            return
        if self.delay > 0:
            self.delay -= delta
            return
        self.current_time += delta
        if self.current_time < self.target_time:
            if self.on_tick is not None:
                self.on_tick(delta, self.current_time)
            return
        if self.looping:
            self.reset(True)
        else:
            self.stop(True)


class TimerManager:
    """Owns a set of timers, advances them and drops the finished ones."""

    def __init__(self):
        self._timers: List[Timer] = []

    def update_timers(self, delta: float) -> None:
        # Timers created by callbacks during this pass start on the next one.
        for timer in list(self._timers):
            timer.update(delta)
        self._timers = [timer for timer in self._timers if not timer.finished]

    def create_timer(
        self,
        time_to_wait: float,
        on_complete: Optional[EndCallback] = None,
        delay: float = 0.0,
        loop: bool = False,
    ) -> Timer:
        timer = Timer(time_to_wait, on_complete, delay, loop)
        self._timers.append(timer)
        return timer

    def create_continuous_timer(
        self,
        time_to_wait: float,
        on_tick: Optional[TickCallback],
        on_complete: Optional[EndCallback] = None,
        delay: float = 0.0,
        loop: bool = False,
    ) -> Timer:
        timer = Timer(time_to_wait, on_complete, delay, loop, on_tick)
        self._timers.append(timer)
        return timer

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self):
        return iter(list(self._timers))