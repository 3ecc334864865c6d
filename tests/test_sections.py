import random

import pytest

from serpent.sections import (
    BLUE,
    COLOURS,
    CYAN,
    GREEN,
    PURPLE,
    RED,
    WHITE,
    YELLOW,
    Section,
    random_colour,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == len(COLOURS)
        return self.value


def test_random_colour_yields_source_escape_sequences():
    assert random_colour(_FixedRng(0)) == "\33[41m  \33[00m"
    assert random_colour(_FixedRng(6)) == "\33[47m  \33[00m"
    assert COLOURS == (RED, GREEN, YELLOW, BLUE, PURPLE, CYAN, WHITE)


@pytest.mark.parametrize("index", range(7))
def test_random_colour_maps_index_in_order(index):
    assert random_colour(_FixedRng(index)) == COLOURS[index]


def test_random_colour_always_a_known_colour():
    rng = random.Random(3)
    seen = {random_colour(rng) for _ in range(300)}
    assert seen <= set(COLOURS)
    assert len(seen) == len(COLOURS)


def test_section_defaults():
    s = Section()
    assert s.length == 1
    assert s.colour == ""


def test_section_holds_colour():
    s = Section(colour=BLUE, length=1)
    assert s.colour == BLUE
    assert s == Section(BLUE)