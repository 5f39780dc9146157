# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable, Optional

from core.wheel import WheelModel


class WheelPicker(tk.Canvas):
    """
    Three-row scrolling wheel. Drag or use the mouse wheel; on release it
    snaps to a row (WheelModel.snap) and reports the selected value.
    """

    VISIBLE_ROWS = 3

    def __init__(
        self,
        master,
        model: WheelModel,
        value: int,
        on_change: Optional[Callable[[int], None]] = None,
        width: int = 80,
        accent: str = "#3B82F6",
        muted: str = "#6B7280",
    ):
        super().__init__(
            master,
            width=width,
            height=model.item_height * self.VISIBLE_ROWS,
            highlightthickness=0,
            bg="#FFFFFF",
        )
        self.model = model
        self.on_change = on_change
        self.accent = accent
        self.muted = muted

        self._first = model.first_index_for(value)
        self._offset = 0
        self._drag_y: Optional[int] = None

        self.bind("<ButtonPress-1>", self._on_press)
        self.bind("<B1-Motion>", self._on_drag)
        self.bind("<ButtonRelease-1>", self._on_release)
        self.bind("<MouseWheel>", lambda e: self._step(-1 if e.delta > 0 else 1))
        self.bind("<Button-4>", lambda e: self._step(-1))
        self.bind("<Button-5>", lambda e: self._step(1))

        self._redraw()

    @property
    def value(self) -> int:
        return self.model.selected_value(self._first)

    # ---- input ----
    def _on_press(self, e):
        self._drag_y = e.y

    def _on_drag(self, e):
        if self._drag_y is None:
            return
        dy = e.y - self._drag_y
        self._drag_y = e.y
        self._scroll_by(dy)

    def _on_release(self, e):
        self._drag_y = None
        self._first = self.model.snap(self._first, self._offset)
        self._offset = 0
        self._settle()

    def _step(self, rows: int):
        self._first += rows
        self._offset = 0
        self._settle()

    def _scroll_by(self, dy: int):
        h = self.model.item_height
        self._offset += dy
        while self._offset <= -h:
            self._first += 1
            self._offset += h
        while self._offset > 0:
            self._first -= 1
            self._offset -= h
        self._redraw()

    def _settle(self):
        self._redraw()
        if self.on_change:
            self.on_change(self.value)

    # ---- drawing ----
    def _redraw(self):
        self.delete("all")
        h = self.model.item_height
        w = int(self["width"])

        for row in range(self.VISIBLE_ROWS + 1):
            idx = self._first + row
            y = self._offset + row * h + h // 2
            selected = idx == self._first + 1 and self._offset == 0
            self.create_text(
                w // 2,
                y,
                text=self.model.display_value(idx),
                font=("Sans", 20, "bold" if selected else "normal"),
                fill=self.accent if selected else self.muted,
            )

        self.create_line(0, h, w, h, fill=self.accent, width=2)
        self.create_line(0, 2 * h, w, 2 * h, fill=self.accent, width=2)
