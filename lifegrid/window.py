"""Drawing of the grid into a window."""

from __future__ import annotations

import pygame

from lifegrid.grid import Grid

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class Window:
    """An on-screen window that shows a grid with black live cells."""

    def __init__(self, title: str, width: int, height: int) -> None:
        pygame.display.init()
        self._width = width
        self._height = height
        self._surface = pygame.display.set_mode((width, height), pygame.SHOWN)
        pygame.display.set_caption(title)
        self._surface.fill(_WHITE)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def cell_at(self, grid: Grid, x: int, y: int) -> tuple[int, int]:
        """Return the (row, col) of the cell under a point of the window."""
        row = int(y / self._height * grid.rows)
        col = int(x / self._width * grid.cols)
        return min(max(row, 0), grid.rows - 1), min(max(col, 0), grid.cols - 1)

    def redraw(self, grid: Grid) -> None:
        """Draw the grid lines and the live cells, then show the frame."""
        surface = self._surface
        surface.fill(_WHITE)
        cell_h = self._height / grid.rows
        cell_w = self._width / grid.cols

        for i in range(grid.rows + 1):
            y = min(int(i * cell_h), self._height - 1)
            pygame.draw.line(surface, _BLACK, (0, y), (self._width, y))
        for j in range(grid.cols + 1):
            x = min(int(j * cell_w), self._width - 1)
            pygame.draw.line(surface, _BLACK, (x, 0), (x, self._height))

        for i in range(grid.rows):
            top = int(i * cell_h)
            bottom = int((i + 1) * cell_h)
            for j, alive in enumerate(grid[i]):
                if alive:
                    left = int(j * cell_w)
                    right = int((j + 1) * cell_w)
                    rect = pygame.Rect(left, top, right - left, bottom - top)
                    pygame.draw.rect(surface, _BLACK, rect)

        pygame.display.flip()