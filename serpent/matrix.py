"""Occupancy matrix recording what lies in each cell of the playing field."""

from __future__ import annotations

from enum import Enum


class Element(Enum):
    """What a cell of the field holds."""

    NOTHING = 0
    FRUIT = 1
    SNAKE = 2


class Matrix:
    """A rows x cols table of :class:`Element`, indexed by ``(x, y)``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"matrix dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [[Element.NOTHING] * cols for _ in range(rows)]

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(f"position {pos!r} outside a {self.rows}x{self.cols} matrix")
        return x, y

    def clear(self) -> None:
        """Mark every cell as holding nothing."""
        for row in self._cells:
            row[:] = [Element.NOTHING] * self.cols

    def __getitem__(self, pos: tuple[int, int]) -> Element:
        x, y = self._check(pos)
        return self._cells[x][y]

    def __setitem__(self, pos: tuple[int, int], value: Element) -> None:
        x, y = self._check(pos)
        self._cells[x][y] = Element(value)