# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from tkinterweb import HtmlFrame

from config import AppConfig
from domain.models import SessionState
from services.session_service import SessionService
from ui.dialogs import SetsDialog, TimerDialog
from ui.summary_renderer import SummaryRenderer

logger = logging.getLogger(__name__)

STATUS_CLEAR_MS = 2000


class MainWindow:
    def __init__(self, root: tk.Tk, session_service: SessionService, config: AppConfig):
        self.root = root
        self.session_service = session_service
        self.config = config

        self.root.title("Set Counter")
        self.root.geometry("420x720")

        self._summary = SummaryRenderer()
        self._next_set: Optional[tk.Toplevel] = None
        self._status_job = None

        self._build_ui()

        self.session_service.subscribe(self._render)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._render(self.session_service.state)

    def _build_ui(self):
        outer = ttk.Frame(self.root, padding=16)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)
        outer.rowconfigure(2, weight=1)

        # --- timer ---
        timer = ttk.Frame(outer)
        timer.grid(row=0, column=0, pady=(16, 8))
        ttk.Label(timer, text="Rest", font=("Sans", 18)).pack()
        self.time_var = tk.StringVar(value="01:00")
        ttk.Label(timer, textvariable=self.time_var, font=("Sans", 56, "bold")).pack()

        # --- count ---
        count = ttk.Frame(outer)
        count.grid(row=1, column=0, sticky="ew")
        count.columnconfigure(0, weight=1)

        self.count_var = tk.StringVar(value="0 / 10")
        ttk.Label(count, textvariable=self.count_var, font=("Sans", 32, "bold")).grid(
            row=0, column=0
        )

        self.progress = ttk.Progressbar(count, maximum=1.0, mode="determinate")
        self.progress.grid(row=1, column=0, sticky="ew", padx=24, pady=12)

        btns = ttk.Frame(count)
        btns.grid(row=2, column=0)
        self.dec_btn = ttk.Button(
            btns, text="-", width=4, command=self.session_service.decrement
        )
        self.inc_btn = ttk.Button(
            btns, text="+", width=4, command=self.session_service.increment
        )
        self.dec_btn.grid(row=0, column=0, padx=(0, 8))
        self.inc_btn.grid(row=0, column=1)

        # --- summary ---
        self.summary_frame = HtmlFrame(outer, horizontal_scrollbar="auto")
        self.summary_frame.grid(row=2, column=0, sticky="nsew", pady=(12, 12))

        # --- settings + reset ---
        bottom = ttk.Frame(outer)
        bottom.grid(row=3, column=0)
        ttk.Button(bottom, text="Reset", command=self.session_service.reset).grid(
            row=0, column=0, columnspan=2, pady=(0, 6)
        )
        ttk.Button(bottom, text="Set Timer", command=self._open_timer_dialog).grid(
            row=1, column=0, padx=(0, 6)
        )
        ttk.Button(bottom, text="Set Sets", command=self._open_sets_dialog).grid(
            row=1, column=1
        )

        self.status_var = tk.StringVar(value="")
        ttk.Label(outer, textvariable=self.status_var, foreground="#6B7280").grid(
            row=4, column=0, pady=(8, 0)
        )

    # ----- Dialogs -----
    def _open_timer_dialog(self):
        TimerDialog(
            self.root,
            self.session_service.state.rest_duration_ms,
            on_confirm=self._set_timer,
            snap_threshold=self.config.wheel_snap_threshold,
        )

    def _open_sets_dialog(self):
        SetsDialog(self.root, on_confirm=self._set_sets)

    def _set_timer(self, duration_ms: int):
        self.session_service.set_timer_duration(duration_ms)
        sec = duration_ms // 1000
        self._flash_status(f"Timer: {sec // 60} min {sec % 60} s")

    def _set_sets(self, total_sets: int):
        self.session_service.set_total_sets(total_sets)
        self._flash_status(f"Total sets: {total_sets}")

    def _flash_status(self, msg: str):
        self.status_var.set(msg)
        if self._status_job is not None:
            self.root.after_cancel(self._status_job)
        self._status_job = self.root.after(STATUS_CLEAR_MS, self._clear_status)

    def _clear_status(self):
        self._status_job = None
        self.status_var.set("")

    # ----- Rendering -----
    def _render(self, snap: SessionState):
        self.time_var.set(snap.timer_text)
        self.count_var.set(f"{snap.count} / {snap.total_sets}")
        self.progress["value"] = snap.progress_fraction

        if snap.can_decrement:
            self.dec_btn.state(["!disabled"])
        else:
            self.dec_btn.state(["disabled"])

        self.summary_frame.load_html(self._summary.to_html(snap))

        if snap.notification_visible:
            self._show_next_set()
        else:
            self._hide_next_set()

    def _show_next_set(self):
        if self._next_set is not None:
            return
        top = tk.Toplevel(self.root)
        top.title("")
        top.transient(self.root)
        top.resizable(False, False)
        top.protocol("WM_DELETE_WINDOW", self.session_service.dismiss_notification)

        frame = ttk.Frame(top, padding=20)
        frame.pack(fill="both", expand=True)
        ttk.Label(frame, text="NEXT SET", font=("Sans", 22, "bold")).pack(pady=(0, 12))
        ttk.Button(
            frame, text="OK", command=self.session_service.dismiss_notification
        ).pack(anchor="e")
        self._next_set = top

    def _hide_next_set(self):
        if self._next_set is None:
            return
        try:
            self._next_set.destroy()
        except tk.TclError:
            logger.debug("next-set window already gone")
        self._next_set = None

    def _on_close(self):
        self.session_service.unsubscribe(self._render)
        self.session_service.close()
        self.root.destroy()
