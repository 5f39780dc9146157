# -*- coding: utf-8 -*-

from typing import Optional, Tuple

from domain.models import DEFAULT_TOTAL_SETS, MAX_SETS, MIN_SETS

MAX_MINUTES = 59
SECONDS_STEP = 15
SECONDS_STEPS = (0, 15, 30, 45)


def parse_sets(text: str) -> Optional[int]:
    """
    Returns the set count if `text` is an integer in [1, 99], else None.
    """
    try:
        n = int((text or "").strip())
    except ValueError:
        return None
    if MIN_SETS <= n <= MAX_SETS:
        return n
    return None


def accept_sets_edit(previous: str, new: str) -> str:
    # empty is allowed while typing; anything else must already be valid
    if new == "" or parse_sets(new) is not None:
        return new
    return previous


def resolve_sets_confirm(text: str) -> int:
    n = parse_sets(text)
    return DEFAULT_TOTAL_SETS if n is None else n


def timer_duration_ms(minutes: int, seconds: int) -> int:
    if not (0 <= minutes <= MAX_MINUTES):
        raise ValueError(f"Minutes must be between 0 and {MAX_MINUTES}.")
    if seconds not in SECONDS_STEPS:
        raise ValueError("Seconds must be one of 0, 15, 30, 45.")
    return (minutes * 60 + seconds) * 1000


def split_duration(duration_ms: int) -> Tuple[int, int]:
    """
    (minutes, seconds) for pre-filling the timer pickers.
    Seconds snap down to the nearest 15 s step; minutes cap at 59.
    """
    sec = max(0, int(duration_ms)) // 1000
    m = min(sec // 60, MAX_MINUTES)
    s = (sec % 60) // SECONDS_STEP * SECONDS_STEP
    return m, s
