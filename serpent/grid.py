"""Coloured display grid with a fruit position."""

from __future__ import annotations

import random

EMPTY_CELL = "\33[40m  \33[00m"
FRUIT_CELL = "\33[41m  \33[00m"

_CLEAR_SCREEN = "\033[2J\033[H"
_BORDER = "\033[47m  \033[0m"
_NEXT_LINE = "\33[1E"


class Grid:
    """A rows x cols grid of terminal cell strings, indexed by ``(x, y)``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.fruit: tuple[int, int] = (0, 0)
        self._cells = [[EMPTY_CELL] * cols for _ in range(rows)]

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(f"position {pos!r} outside a {self.rows}x{self.cols} grid")
        return x, y

    def clear(self) -> None:
        """Fill every cell with a black blank."""
        for row in self._cells:
            row[:] = [EMPTY_CELL] * self.cols

    def draw_fruit(self, rng: random.Random) -> tuple[int, int]:
        """Pick a random fruit position and return it."""
        self.fruit = (rng.randrange(self.rows), rng.randrange(self.cols))
        return self.fruit

    def place_fruit(self) -> None:
        """Paint the fruit at its current position."""
        self[self.fruit] = FRUIT_CELL

    def render(self) -> str:
        """Return the escape sequence that draws the grid inside a white frame."""
        edge = "\033[47m" + "  " * (self.cols + 2)
        parts = [_CLEAR_SCREEN, edge, "\033[0m " + _NEXT_LINE]
        for row in self._cells:
            parts.append(_BORDER)
            parts.extend(row)
            parts.append(_BORDER + _NEXT_LINE)
        parts.append(edge)
        parts.append("\033[0m" + _NEXT_LINE)
        return "".join(parts)

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = self._check(pos)
        return self._cells[x][y]

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        x, y = self._check(pos)
        self._cells[x][y] = value