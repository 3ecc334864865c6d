"""The snake: a head, its body sections and the trail of moves they follow."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

from serpent.grid import Grid
from serpent.matrix import Element, Matrix
from serpent.moves import Move, MoveList
from serpent.sections import Section

HEAD_COLOUR = "\33[42m..\33[00m"


@dataclass
class Head:
    """The snake's head: its position on the field and its colour."""

    x: int
    y: int
    colour: str = HEAD_COLOUR

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)


class Snake:
    """A head followed by body sections that trail along the recorded moves."""

    def __init__(self, head: Head) -> None:
        self.head = head
        self.sections: deque[Section] = deque()
        self.moves = MoveList()

    def is_empty(self) -> bool:
        """True when the snake has no body sections."""
        return not self.sections

    def add_section_front(self, section: Section) -> None:
        self.sections.appendleft(section)

    def add_section_back(self, section: Section) -> None:
        self.sections.append(section)

    def pop_front_section(self) -> Section:
        """Remove and return the first body section; raise IndexError when empty."""
        if not self.sections:
            raise IndexError("the snake has no sections")
        return self.sections.popleft()

    def __len__(self) -> int:
        return len(self.sections)

    def record_move(self, direction: Any) -> None:
        """Remember the current head position, newest first, with the given direction."""
        self.moves.push_front(Move(self.head.x, self.head.y, direction))

    def show_head(self, grid: Grid) -> None:
        """Paint only the head on the grid."""
        grid[self.head.pos] = self.head.colour

    def fill(self, grid: Grid, matrix: Matrix) -> str:
        """Lay the fruit and the whole snake onto the grid and matrix; return the drawing.

        Each body section takes the position of the matching recorded move, so
        the body follows the path the head has travelled.
        """
        grid.clear()
        matrix.clear()

        grid.place_fruit()
        matrix[grid.fruit] = Element.FRUIT

        grid[self.head.pos] = self.head.colour
        matrix[self.head.pos] = Element.SNAKE

        for section, move in zip(self.sections, self.moves):
            grid[(move.x, move.y)] = section.colour
            matrix[(move.x, move.y)] = Element.SNAKE

        return grid.render()