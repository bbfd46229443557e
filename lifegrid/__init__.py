"""Conway's Game of Life on a wrap-around grid, with a pygame front end."""

__version__ = "0.1.0"