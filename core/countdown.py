# -*- coding: utf-8 -*-

from typing import Any, Callable, Optional, Protocol

DEFAULT_TICK_MS = 1000


class Scheduler(Protocol):
    """
    Host timing facility. Callbacks run on the host's event loop thread,
    one at a time.
    """

    def now_ms(self) -> int: ...

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Any: ...

    def cancel(self, job: Any) -> None: ...


class TimerHandle:
    """Owns at most one scheduled job. cancel() is idempotent."""

    def __init__(self, scheduler: Scheduler):
        self._scheduler = scheduler
        self._job: Optional[Any] = None
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._job is not None:
            self._scheduler.cancel(self._job)
            self._job = None

    def _schedule(self, delay_ms: int, fn: Callable[[], None]) -> None:
        self._job = self._scheduler.call_later(max(0, int(delay_ms)), fn)


class CountdownHandle(TimerHandle):
    def __init__(
        self,
        scheduler: Scheduler,
        duration_ms: int,
        tick_interval_ms: int,
        on_tick: Callable[[int], None],
        on_elapsed: Callable[[], None],
    ):
        super().__init__(scheduler)
        self.duration_ms = int(duration_ms)
        self.tick_interval_ms = int(tick_interval_ms)
        self._on_tick = on_tick
        self._on_elapsed = on_elapsed
        self._end_ms = scheduler.now_ms() + self.duration_ms

    def _step(self) -> None:
        self._job = None
        if not self._active:
            return

        remaining = self._end_ms - self._scheduler.now_ms()
        if remaining <= 0:
            self._active = False
            self._on_elapsed()
            return

        self._on_tick(remaining)

        # the tick callback may have cancelled us
        if self._active:
            self._schedule(min(self.tick_interval_ms, remaining), self._step)


class CountdownTimer:
    """
    start() begins a countdown: on_tick(remaining_ms) with the full duration
    on the next scheduler turn, then once per tick interval, and finally
    on_elapsed() once the duration has passed. No tick is delivered at 0.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler

    def start(
        self,
        duration_ms: int,
        on_tick: Callable[[int], None],
        on_elapsed: Callable[[], None],
        tick_interval_ms: int = DEFAULT_TICK_MS,
    ) -> CountdownHandle:
        if duration_ms < 0:
            raise ValueError("Countdown duration cannot be negative.")
        if tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive.")

        handle = CountdownHandle(
            self.scheduler, duration_ms, tick_interval_ms, on_tick, on_elapsed
        )
        handle._schedule(0, handle._step)
        return handle


class OneShot(TimerHandle):
    def __init__(self, scheduler: Scheduler, delay_ms: int, fn: Callable[[], None]):
        super().__init__(scheduler)
        self._fn = fn
        self._schedule(delay_ms, self._fire)

    def _fire(self) -> None:
        self._job = None
        if not self._active:
            return
        self._active = False
        self._fn()
