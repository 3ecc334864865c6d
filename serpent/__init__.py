"""A terminal snake game: grid, occupancy matrix, snake, game rules and command."""

__version__ = "0.1.0"