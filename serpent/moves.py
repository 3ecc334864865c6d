"""History of the positions the snake's head has passed through."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class Direction(Enum):
    """A heading on the grid."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


@dataclass
class Move:
    """A head position together with the key or direction that led away from it."""

    x: int
    y: int
    direction: Any = None


class MoveList:
    """Ordered list of moves, newest first when built with :meth:`push_front`."""

    def __init__(self) -> None:
        self._moves: deque[Move] = deque()

    def is_empty(self) -> bool:
        return not self._moves

    def push_front(self, move: Move) -> None:
        self._moves.appendleft(move)

    def push_back(self, move: Move) -> None:
        self._moves.append(move)

    def pop_front(self) -> Move:
        """Remove and return the first move; raise IndexError when empty."""
        if not self._moves:
            raise IndexError("pop from an empty move list")
        return self._moves.popleft()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)