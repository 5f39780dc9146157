# -*- coding: utf-8 -*-

import logging
from dataclasses import replace
from typing import Optional

from domain.models import (
    DEFAULT_REST_MS,
    DEFAULT_TOTAL_SETS,
    MAX_SETS,
    MIN_SETS,
    SessionState,
    TimerStatus,
)

logger = logging.getLogger(__name__)


class SessionEngine:
    """
    Pure set-counter state machine (no timers, no storage).

    Every transition replaces `state` with a new frozen snapshot.
    Countdown and auto-dismiss callbacks are tagged with a generation id;
    the engine ignores any callback whose generation is not the current one.
    """

    def __init__(
        self,
        total_sets: int = DEFAULT_TOTAL_SETS,
        rest_duration_ms: int = DEFAULT_REST_MS,
    ):
        _check_sets(total_sets)
        _check_duration(rest_duration_ms)

        self.state = SessionState(
            total_sets=int(total_sets),
            rest_duration_ms=int(rest_duration_ms),
            remaining_ms=int(rest_duration_ms),
        )
        self.countdown_gen = 0
        self.dismiss_gen = 0

    def snapshot(self) -> SessionState:
        return self.state

    # ----- intents -----
    def load_count(self, count: int) -> None:
        self.state = replace(self.state, count=max(0, int(count)))

    def increment(self) -> int:
        """
        Returns the generation id the new countdown must be tagged with.
        """
        self.countdown_gen += 1
        self.dismiss_gen += 1
        s = self.state
        self.state = replace(
            s,
            count=s.count + 1,
            remaining_ms=s.rest_duration_ms,
            timer_status=TimerStatus.RUNNING,
            notification_visible=False,
        )
        logger.debug("increment -> count=%d gen=%d", self.state.count, self.countdown_gen)
        return self.countdown_gen

    def decrement(self) -> bool:
        if self.state.count <= 0:
            return False
        self._stop(count=self.state.count - 1)
        logger.debug("decrement -> count=%d", self.state.count)
        return True

    def reset(self) -> None:
        self._stop(count=0)
        logger.debug("reset")

    def configure_timer(self, duration_ms: int) -> None:
        _check_duration(duration_ms)
        self.state = replace(self.state, rest_duration_ms=int(duration_ms))
        self._stop(count=self.state.count)
        logger.debug("rest duration -> %d ms", duration_ms)

    def configure_sets(self, total_sets: int) -> None:
        _check_sets(total_sets)
        self.state = replace(self.state, total_sets=int(total_sets))

    def dismiss(self) -> bool:
        if not self.state.notification_visible:
            return False
        self.dismiss_gen += 1
        self.state = replace(
            self.state, notification_visible=False, timer_status=TimerStatus.IDLE
        )
        return True

    # ----- timer callbacks -----
    def tick(self, gen: int, remaining_ms: int) -> bool:
        if gen != self.countdown_gen or self.state.timer_status != TimerStatus.RUNNING:
            logger.debug("stale tick discarded (gen=%d current=%d)", gen, self.countdown_gen)
            return False
        remaining = min(max(0, int(remaining_ms)), self.state.rest_duration_ms)
        self.state = replace(self.state, remaining_ms=remaining)
        return True

    def elapse(self, gen: int) -> Optional[int]:
        """
        Returns the generation id for the auto-dismiss, or None if the
        callback was stale.
        """
        if gen != self.countdown_gen or self.state.timer_status != TimerStatus.RUNNING:
            logger.debug("stale elapse discarded (gen=%d current=%d)", gen, self.countdown_gen)
            return None
        self.dismiss_gen += 1
        self.state = replace(
            self.state,
            remaining_ms=0,
            timer_status=TimerStatus.FINISHED,
            notification_visible=True,
        )
        return self.dismiss_gen

    def auto_dismiss(self, gen: int) -> bool:
        if gen != self.dismiss_gen:
            logger.debug("stale auto-dismiss discarded (gen=%d current=%d)", gen, self.dismiss_gen)
            return False
        return self.dismiss()

    # ----- internals -----
    def _stop(self, count: int) -> None:
        # invalidates any countdown and any pending auto-dismiss
        self.countdown_gen += 1
        self.dismiss_gen += 1
        s = self.state
        self.state = replace(
            s,
            count=count,
            remaining_ms=s.rest_duration_ms,
            timer_status=TimerStatus.IDLE,
            notification_visible=False,
        )


def _check_sets(total_sets: int) -> None:
    if not (MIN_SETS <= int(total_sets) <= MAX_SETS):
        raise ValueError(f"Total sets must be between {MIN_SETS} and {MAX_SETS}.")


def _check_duration(duration_ms: int) -> None:
    if int(duration_ms) < 0:
        raise ValueError("Rest duration cannot be negative.")
