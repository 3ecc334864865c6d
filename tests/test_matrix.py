import pytest

from serpent.matrix import Element, Matrix


def test_element_values_round_trip_through_matrix():
    assert [e.name for e in Element] == ["NOTHING", "FRUIT", "SNAKE"]
    m = Matrix(1, 3)
    for y, value in enumerate((0, 1, 2)):
        m[0, y] = Element(value)
    assert [m[0, y] for y in range(3)] == [
        Element.NOTHING,
        Element.FRUIT,
        Element.SNAKE,
    ]


def test_new_matrix_is_empty():
    m = Matrix(3, 4)
    assert (m.rows, m.cols) == (3, 4)
    assert all(m[x, y] is Element.NOTHING for x in range(3) for y in range(4))


def test_set_and_get_round_trip():
    m = Matrix(3, 4)
    m[2, 3] = Element.FRUIT
    m[0, 1] = Element.SNAKE
    assert m[2, 3] is Element.FRUIT
    assert m[0, 1] is Element.SNAKE
    assert m[1, 1] is Element.NOTHING


def test_clear_resets_every_cell():
    m = Matrix(2, 2)
    m[0, 0] = Element.SNAKE
    m[1, 1] = Element.FRUIT
    m.clear()
    assert all(m[x, y] is Element.NOTHING for x in range(2) for y in range(2))


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 4), (5, 5)])
def test_out_of_range_raises(pos):
    m = Matrix(3, 4)
    with pytest.raises(IndexError):
        m[pos]
    with pytest.raises(IndexError):
        m[pos] = Element.FRUIT
    assert all(m[x, y] is Element.NOTHING for x in range(3) for y in range(4))


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions_raise(rows, cols):
    with pytest.raises(ValueError):
        Matrix(rows, cols)


def test_setting_invalid_value_raises():
    m = Matrix(1, 1)
    with pytest.raises(ValueError):
        m[0, 0] = 42
    assert m[0, 0] is Element.NOTHING