"""Body sections of the snake and their colours."""

from __future__ import annotations

import random
from dataclasses import dataclass

RED = "\33[41m  \33[00m"
GREEN = "\33[42m  \33[00m"
YELLOW = "\33[43m  \33[00m"
BLUE = "\33[44m  \33[00m"
PURPLE = "\33[45m  \33[00m"
CYAN = "\33[46m  \33[00m"
WHITE = "\33[47m  \33[00m"

COLOURS = (RED, GREEN, YELLOW, BLUE, PURPLE, CYAN, WHITE)


@dataclass
class Section:
    """One body segment of the snake."""

    colour: str = ""
    length: int = 1


def random_colour(rng: random.Random) -> str:
    """Pick one of the seven section colours."""
    return COLOURS[rng.randrange(len(COLOURS))]