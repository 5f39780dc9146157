# -*- coding: utf-8 -*-

import time
import tkinter as tk
from typing import Any, Callable


class TkScheduler:
    """Scheduler backed by the Tk event loop (after / after_cancel)."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Any:
        return self.root.after(max(0, int(delay_ms)), fn)

    def cancel(self, job: Any) -> None:
        try:
            self.root.after_cancel(job)
        except tk.TclError:
            # window already destroyed
            pass
