"""Game rules, the terminal loop and the command entry point."""

from __future__ import annotations

import curses
import random
import sys
from typing import Any, Sequence

from serpent.grid import Grid
from serpent.matrix import Element, Matrix
from serpent.moves import Direction
from serpent.sections import Section, random_colour
from serpent.snake import HEAD_COLOUR, Head, Snake

QUIT = "q"
START = (2, 1)

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}

_FAREWELL = "\33[2J\33[H\n\n Fin ! \n"


def eats(snake: Snake, matrix: Matrix) -> bool:
    """True when the head stands on the fruit."""
    return matrix[snake.head.pos] is Element.FRUIT


def hits_itself(snake: Snake, matrix: Matrix) -> bool:
    """True when the head stands on a cell the snake already occupies."""
    return matrix[snake.head.pos] is Element.SNAKE


def redraw_fruit(grid: Grid, matrix: Matrix, rng: random.Random) -> None:
    """Draw the fruit again for as long as it lands on the snake."""
    while matrix[grid.fruit] is Element.SNAKE:
        grid.draw_fruit(rng)


class Game:
    """State of one game: the field, its occupancy and the snake."""

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.grid = Grid(rows, cols)
        self.matrix = Matrix(rows, cols)
        self.snake = Snake(Head(*START, colour=HEAD_COLOUR))
        self.last_key: Any = None
        self.crashed = False

    def _inside(self) -> bool:
        x, y = self.snake.head.pos
        return 0 <= x < self.grid.rows and 0 <= y < self.grid.cols

    def step(self, key: Any) -> bool:
        """Play one key; return whether the game goes on.

        Arrow directions move the head.  Leaving the field or running into the
        snake ends the game and sets :attr:`crashed`; the quit key ends it
        after the field has been redrawn.
        """
        if self.crashed:
            return False
        previous, self.last_key = self.last_key, key
        self.snake.record_move(previous)

        if isinstance(key, Direction):
            dx, dy = _OFFSETS[key]
            self.snake.head.x += dx
            self.snake.head.y += dy

        if not self._inside() or hits_itself(self.snake, self.matrix):
            self.crashed = True
            return False

        if eats(self.snake, self.matrix):
            count = self.rng.randint(1, 5)
            self.grid.draw_fruit(self.rng)
            redraw_fruit(self.grid, self.matrix, self.rng)
            self.grid.clear()
            for _ in range(count):
                self.snake.add_section_front(Section(random_colour(self.rng)))

        self.snake.fill(self.grid, self.matrix)
        return key != QUIT

    def frame(self) -> str:
        """The escape sequence that draws the current field."""
        return self.grid.render()


def _translate(code: int) -> Any:
    if code in _KEYS:
        return _KEYS[code]
    if code == ord(QUIT):
        return QUIT
    return code


def play(screen: Any, game: Game) -> None:
    """Read keys from a curses screen and draw each frame until the game ends."""
    out = sys.stdout
    while True:
        running = game.step(_translate(screen.getch()))
        if game.crashed:
            break
        out.write(game.frame())
        out.flush()
        if not running:
            break


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game: ROWS COLS DELAY PLAYERS."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print("wrong number of arguments: expected ROWS COLS DELAY PLAYERS", file=sys.stderr)
        return 1
    try:
        rows, cols, _delay, _players = (int(arg) for arg in args)
    except ValueError:
        print("arguments must be integers", file=sys.stderr)
        return 1
    try:
        game = Game(rows, cols)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    def _run(screen: Any) -> None:
        curses.raw()
        play(screen, game)

    curses.wrapper(_run)
    sys.stdout.write(_FAREWELL)
    sys.stdout.flush()
    return 0