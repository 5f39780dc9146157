# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable

from core.inputs import (
    SECONDS_STEP,
    accept_sets_edit,
    resolve_sets_confirm,
    split_duration,
    timer_duration_ms,
)
from core.wheel import WheelModel
from ui.wheel_picker import WheelPicker


class _Dialog(tk.Toplevel):
    def __init__(self, master, title: str):
        super().__init__(master)
        self.title(title)
        self.resizable(False, False)
        self.transient(master)
        self.protocol("WM_DELETE_WINDOW", self.destroy)
        self.bind("<Escape>", lambda e: self.destroy())

    def _buttons(self, parent, on_ok: Callable[[], None], row: int):
        btns = ttk.Frame(parent)
        btns.grid(row=row, column=0, columnspan=3, sticky="e", pady=(12, 0))
        ttk.Button(btns, text="Cancel", command=self.destroy).pack(side="right")
        ttk.Button(btns, text="OK", command=on_ok).pack(side="right", padx=(0, 6))


class TimerDialog(_Dialog):
    """Minutes (0-59) and seconds (0/15/30/45) wheels."""

    def __init__(
        self,
        master,
        duration_ms: int,
        on_confirm: Callable[[int], None],
        snap_threshold: int = 25,
    ):
        super().__init__(master, "Set Timer Duration")
        self.on_confirm = on_confirm

        minutes, seconds = split_duration(duration_ms)

        body = ttk.Frame(self, padding=14)
        body.pack(fill="both", expand=True)

        ttk.Label(body, text="Minutes").grid(row=0, column=0)
        ttk.Label(body, text="Seconds").grid(row=0, column=2)

        self.min_wheel = WheelPicker(
            body, WheelModel(size=60, snap_threshold=snap_threshold), minutes
        )
        self.min_wheel.grid(row=1, column=0)

        ttk.Label(body, text=":", font=("Sans", 24, "bold")).grid(
            row=1, column=1, padx=12
        )

        self.sec_wheel = WheelPicker(
            body,
            WheelModel(size=4, multiplier=SECONDS_STEP, snap_threshold=snap_threshold),
            seconds // SECONDS_STEP,
        )
        self.sec_wheel.grid(row=1, column=2)

        self._buttons(body, self._ok, row=2)
        self.grab_set()

    def _ok(self):
        total = timer_duration_ms(
            self.min_wheel.value, self.sec_wheel.value * SECONDS_STEP
        )
        self.destroy()
        self.on_confirm(total)


class SetsDialog(_Dialog):
    """Free-text set count; invalid edits are refused as they are typed."""

    def __init__(self, master, on_confirm: Callable[[int], None]):
        super().__init__(master, "Set Total Sets")
        self.on_confirm = on_confirm

        body = ttk.Frame(self, padding=14)
        body.pack(fill="both", expand=True)

        ttk.Label(body, text="Number of sets").grid(row=0, column=0, sticky="w")

        self.sets_var = tk.StringVar(value="")
        vcmd = (self.register(self._validate), "%s", "%P")
        self.entry = ttk.Entry(
            body,
            textvariable=self.sets_var,
            width=12,
            validate="key",
            validatecommand=vcmd,
        )
        self.entry.grid(row=1, column=0, sticky="w", pady=(4, 0))
        self.entry.bind("<Return>", lambda e: self._ok())
        self.entry.focus_set()

        self._buttons(body, self._ok, row=2)
        self.grab_set()

    def _validate(self, previous: str, proposed: str) -> bool:
        return accept_sets_edit(previous, proposed) == proposed

    def _ok(self):
        sets = resolve_sets_confirm(self.sets_var.get())
        self.destroy()
        self.on_confirm(sets)
