"""A toroidal Game of Life grid."""

from __future__ import annotations

import random
from collections.abc import Sequence

_FILL_PROBABILITY = 0.4


class Grid:
    """A rectangular field of cells whose edges wrap around."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid size must not be negative: {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [[False] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __getitem__(self, index: int) -> Sequence[bool]:
        """Return a read-only view of one row."""
        return tuple(self._cells[index])

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    def toggle(self, row: int, col: int) -> None:
        """Flip the state of one cell."""
        self._cells[row][col] = not self._cells[row][col]

    def fill_random(self, rng: random.Random | None = None) -> None:
        """Make each cell alive with a probability of 0.4."""
        rng = rng or random.Random()
        self._cells = [
            [rng.random() < _FILL_PROBABILITY for _ in range(self._cols)]
            for _ in range(self._rows)
        ]

    def clear(self) -> None:
        """Kill every cell."""
        self._cells = [[False] * self._cols for _ in range(self._rows)]

    def alive_neighbours(self, row: int, col: int) -> int:
        """Count live cells in the 3x3 block around a cell, wrapping at the edges."""
        count = 0
        for di in (-1, 0, 1):
            ii = (row + di) % self._rows
            for dj in (-1, 0, 1):
                jj = (col + dj) % self._cols
                if ii == row and jj == col:
                    continue
                count += self._cells[ii][jj]
        return count

    def next_state(self) -> None:
        """Advance the field by one generation of Conway's rules."""
        new_cells = []
        for i, row in enumerate(self._cells):
            new_row = []
            for j, alive in enumerate(row):
                count = self.alive_neighbours(i, j)
                if alive:
                    new_row.append(count in (2, 3))
                else:
                    new_row.append(count == 3)
            new_cells.append(new_row)
        self._cells = new_cells