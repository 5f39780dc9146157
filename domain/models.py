# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum

from core.timer_text import format_time, progress_fraction

DEFAULT_TOTAL_SETS = 10
DEFAULT_REST_MS = 60 * 1000
MIN_SETS = 1
MAX_SETS = 99


class TimerStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class SessionState:
    count: int = 0
    total_sets: int = DEFAULT_TOTAL_SETS
    rest_duration_ms: int = DEFAULT_REST_MS
    remaining_ms: int = DEFAULT_REST_MS
    timer_status: TimerStatus = TimerStatus.IDLE
    notification_visible: bool = False

    @property
    def timer_text(self) -> str:
        return format_time(self.remaining_ms)

    @property
    def progress_fraction(self) -> float:
        return progress_fraction(self.count, self.total_sets)

    @property
    def can_decrement(self) -> bool:
        return self.count > 0
