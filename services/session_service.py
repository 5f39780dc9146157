# -*- coding: utf-8 -*-

import logging
from concurrent.futures import Future
from typing import Callable, List, Optional

from config import AppConfig
from core.countdown import DEFAULT_TICK_MS, CountdownHandle, CountdownTimer, OneShot, Scheduler
from core.inputs import resolve_sets_confirm
from core.session_engine import SessionEngine
from domain.models import DEFAULT_REST_MS, DEFAULT_TOTAL_SETS, SessionState
from storage.store import PersistentStore

logger = logging.getLogger(__name__)

AUTO_DISMISS_MS = 3000
LOAD_POLL_MS = 50


class SessionService:
    """
    Orchestrates:
    - SessionEngine state (the only place state changes)
    - the live countdown and the notification auto-dismiss
    - persistence of the counter
    - snapshot callbacks for the UI

    Every method must be called from the scheduler's thread.
    """

    def __init__(
        self,
        store: PersistentStore,
        scheduler: Scheduler,
        total_sets: int = DEFAULT_TOTAL_SETS,
        rest_duration_ms: int = DEFAULT_REST_MS,
        tick_interval_ms: int = DEFAULT_TICK_MS,
        auto_dismiss_ms: int = AUTO_DISMISS_MS,
        load_poll_ms: int = LOAD_POLL_MS,
    ):
        if tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive.")
        if auto_dismiss_ms < 0:
            raise ValueError("Auto-dismiss delay cannot be negative.")

        self.store = store
        self.scheduler = scheduler
        self.engine = SessionEngine(total_sets=total_sets, rest_duration_ms=rest_duration_ms)
        self.countdown = CountdownTimer(scheduler)

        self.tick_interval_ms = tick_interval_ms
        self.auto_dismiss_ms = auto_dismiss_ms
        self.load_poll_ms = load_poll_ms

        self._countdown: Optional[CountdownHandle] = None
        self._dismiss: Optional[OneShot] = None
        self._load_poll: Optional[OneShot] = None
        self._load_future: Optional[Future] = None

        self._loaded = False
        self._count_touched = False

        self._subscribers: List[Callable[[SessionState], None]] = []

    @classmethod
    def from_config(
        cls, config: AppConfig, store: PersistentStore, scheduler: Scheduler
    ) -> "SessionService":
        return cls(
            store,
            scheduler,
            total_sets=config.default_total_sets,
            rest_duration_ms=config.default_rest_ms,
            tick_interval_ms=config.tick_interval_ms,
            auto_dismiss_ms=config.auto_dismiss_ms,
            load_poll_ms=config.load_poll_ms,
        )

    # ----- Callbacks -----
    def subscribe(self, fn: Callable[[SessionState], None]) -> None:
        self._subscribers.append(fn)

    def unsubscribe(self, fn: Callable[[SessionState], None]) -> None:
        if fn in self._subscribers:
            self._subscribers.remove(fn)

    def _emit(self) -> None:
        snap = self.engine.snapshot()
        for fn in list(self._subscribers):
            try:
                fn(snap)
            except Exception:
                logger.exception("session subscriber failed")

    # ----- Public API -----
    @property
    def state(self) -> SessionState:
        return self.engine.snapshot()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def has_active_countdown(self) -> bool:
        return self._countdown is not None and self._countdown.active

    @property
    def has_pending_dismiss(self) -> bool:
        return self._dismiss is not None and self._dismiss.active

    def start(self) -> None:
        """Kick off the one startup read of the persisted counter."""
        if self._load_future is not None:
            return
        try:
            self._load_future = self.store.load_count()
        except Exception:
            logger.warning("could not read stored count", exc_info=True)
            self._finish_load(0)
            return
        self._poll_load()

    def increment(self) -> None:
        # the countdown starts first so a failed start leaves the state untouched
        gen = self.engine.countdown_gen + 1
        self._start_countdown(gen)
        self.engine.increment()
        self._cancel_dismiss()
        self._persist_count()
        self._emit()

    def decrement(self) -> None:
        if not self.engine.decrement():
            return
        self._cancel_timers()
        self._persist_count()
        self._emit()

    def reset(self) -> None:
        self.engine.reset()
        self._cancel_timers()
        self._persist_count()
        self._emit()

    def set_timer_duration(self, duration_ms: int) -> None:
        self.engine.configure_timer(duration_ms)
        self._cancel_timers()
        self._emit()

    def set_total_sets(self, total_sets) -> None:
        """
        Ints are taken as-is (and must be in range). Anything else is
        treated as dialog text: unparseable input falls back to the default.
        """
        if isinstance(total_sets, bool) or not isinstance(total_sets, int):
            total_sets = resolve_sets_confirm(str(total_sets))
        self.engine.configure_sets(total_sets)
        self._emit()

    def dismiss_notification(self) -> None:
        if not self.engine.dismiss():
            return
        self._cancel_dismiss()
        self._emit()

    def close(self) -> None:
        self._cancel_timers()
        if self._load_poll is not None:
            self._load_poll.cancel()
            self._load_poll = None

    # ----- Countdown internals -----
    def _start_countdown(self, gen: int) -> None:
        handle = self.countdown.start(
            self.engine.snapshot().rest_duration_ms,
            on_tick=lambda remaining: self._on_tick(gen, remaining),
            on_elapsed=lambda: self._on_elapsed(gen),
            tick_interval_ms=self.tick_interval_ms,
        )
        # at most one countdown: drop the previous one once the new one exists
        self._cancel_countdown()
        self._countdown = handle

    def _on_tick(self, gen: int, remaining_ms: int) -> None:
        if self.engine.tick(gen, remaining_ms):
            self._emit()

    def _on_elapsed(self, gen: int) -> None:
        dismiss_gen = self.engine.elapse(gen)
        if dismiss_gen is None:
            return
        self._countdown = None
        self._cancel_dismiss()
        self._dismiss = OneShot(
            self.scheduler,
            self.auto_dismiss_ms,
            lambda: self._on_auto_dismiss(dismiss_gen),
        )
        self._emit()

    def _on_auto_dismiss(self, gen: int) -> None:
        if self.engine.auto_dismiss(gen):
            self._dismiss = None
            self._emit()

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _cancel_dismiss(self) -> None:
        if self._dismiss is not None:
            self._dismiss.cancel()
            self._dismiss = None

    def _cancel_timers(self) -> None:
        self._cancel_countdown()
        self._cancel_dismiss()

    # ----- Persistence internals -----
    def _poll_load(self) -> None:
        self._load_poll = None
        fut = self._load_future
        if not fut.done():
            self._load_poll = OneShot(self.scheduler, self.load_poll_ms, self._poll_load)
            return
        try:
            count = fut.result()
        except Exception:
            logger.warning("could not read stored count", exc_info=True)
            count = 0
        self._finish_load(count)

    def _finish_load(self, count: int) -> None:
        self._loaded = True
        if self._count_touched:
            # user already changed the counter; memory wins
            logger.info("stored count %d ignored, counter changed before load", count)
            return
        self.engine.load_count(count)
        logger.info("loaded count=%d", count)
        self._emit()

    def _persist_count(self) -> None:
        self._count_touched = True
        count = self.engine.snapshot().count
        try:
            fut = self.store.save_count(count)
        except Exception:
            logger.warning("could not save count=%d", count, exc_info=True)
            return
        fut.add_done_callback(lambda f: _log_save_failure(f, count))


def _log_save_failure(fut: Future, count: int) -> None:
    exc = fut.exception()
    if exc is not None:
        logger.warning("could not save count=%d: %s", count, exc)
