# serpent

A small snake game for the terminal. The snake's head is green. Each time it
eats the fruit (a red square), between one and five body sections in random
colours are added and a new fruit is placed somewhere off the snake. The game
ends when the snake leaves the grid or runs into itself.

## Installing

```
pip install .
```

## Playing

```
serpent ROWS COLS DELAY PLAYERS
```

All four arguments are required and must be integers:

- `ROWS`: the number of rows in the grid (at least 1)
- `COLS`: the number of columns in the grid (at least 1)
- `DELAY`: accepted, but not used
- `PLAYERS`: accepted, but not used

For example:

```
serpent 20 30 100 1
```

The snake starts at row 2, column 1. Each arrow key moves the head one cell in
that direction; the body follows the path the head has taken. Press `q` to
quit. A farewell message is printed when the game ends.

If the number of arguments is wrong, an argument is not an integer, or a
dimension is not positive, a message is written to standard error and the
command exits with status 1.

## What it does not do

- The snake does not move on its own: it moves only when an arrow key is
  pressed, so there is no timer and `DELAY` has no effect.
- There is only one snake; `PLAYERS` has no effect.
- No score is kept or shown.

## Using it as a library

The parts of the game can be used on their own:

- `serpent.grid.Grid`: the grid of coloured cells, with a fruit position;
  `Grid.render()` returns the escape sequence that draws it inside a white frame
- `serpent.matrix.Matrix` and `serpent.matrix.Element`: what each cell holds
  (`NOTHING`, `FRUIT` or `SNAKE`)
- `serpent.moves.Direction`, `Move` and `MoveList`: the head positions the
  snake has passed through
- `serpent.sections.Section` and `random_colour(rng)`: the snake's body
  sections and their seven colours
- `serpent.snake.Snake` and `Head`: the snake itself; `Snake.fill(grid, matrix)`
  lays the fruit and the snake onto a grid and a matrix and returns the drawing
- `serpent.game.Game`: one game, advanced with `Game.step(key)` (which returns
  whether the game goes on and sets `Game.crashed` on a collision) and drawn
  with `Game.frame()`; keys are `Direction` values or `"q"`
- `serpent.game.eats`, `hits_itself` and `redraw_fruit`: the rules for eating,
  collisions and placing the fruit

`serpent.game.play(screen, game)` runs a game on a curses screen, and
`serpent.game.main(argv)` is the command above.

```python
import random
from serpent.game import Game
from serpent.moves import Direction

game = Game(10, 10, random.Random(1))
game.step(Direction.RIGHT)
print(game.snake.head.pos)  # (2, 2)
```

## Tests

```
pip install .[test]
pytest
```