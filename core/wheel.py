# -*- coding: utf-8 -*-

from dataclasses import dataclass

MIDDLE_INDEX = 50000


@dataclass(frozen=True)
class WheelModel:
    """
    Infinite wheel over range(size).

    The wheel is a long list of rows centred on MIDDLE_INDEX; row `i` shows
    value (i - MIDDLE_INDEX) mod size. The selected row is the one just below
    the first visible row.
    """

    size: int
    multiplier: int = 1
    item_height: int = 50
    snap_threshold: int = 25

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError("Wheel size must be positive.")
        if not (0 < self.snap_threshold <= self.item_height):
            raise ValueError("Snap threshold must be within the item height.")

    def value_at(self, index: int) -> int:
        return (index - MIDDLE_INDEX) % self.size

    def display_value(self, index: int) -> str:
        return f"{self.value_at(index) * self.multiplier:02d}"

    def first_index_for(self, value: int) -> int:
        """First visible row that puts `value` in the selected slot."""
        return MIDDLE_INDEX + (value % self.size) - 1

    def selected_value(self, first_index: int) -> int:
        return self.value_at(first_index + 1)

    def snap(self, first_index: int, offset: int) -> int:
        """
        Where to settle once scrolling stops. `offset` is the (non-positive)
        pixel offset of the first visible row; past the threshold the wheel
        moves on to the next row.
        """
        if offset < -self.snap_threshold:
            return first_index + 1
        return first_index
