# -*- coding: utf-8 -*-


def format_time(remaining_ms: int) -> str:
    # whole seconds, truncated
    sec = max(0, int(remaining_ms)) // 1000
    m = sec // 60
    s = sec % 60
    return f"{m:02d}:{s:02d}"


def progress_fraction(count: int, total_sets: int) -> float:
    if total_sets <= 0:
        return 0.0
    return min(max(0, count), total_sets) / float(total_sets)
