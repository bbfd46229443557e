"""Handlers that react to mouse and keyboard events."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame

from lifegrid.grid import Grid

_MIN_DELAY = 1
_MAX_DELAY = 2000
_DELAY_FACTOR = 1.6


@dataclass
class PlayState:
    """Whether the simulation runs and how long it waits between steps (ms)."""

    paused: bool = True
    delay: int = 300


class Handler(ABC):
    """Something that reacts to a particular kind of event."""

    @abstractmethod
    def matches(self, event: pygame.event.Event) -> bool:
        """Tell whether this handler is interested in the event."""

    @abstractmethod
    def handle(self, event: pygame.event.Event) -> None:
        """React to the event."""


def _is_key(event: pygame.event.Event, *keys: int) -> bool:
    return event.type == pygame.KEYDOWN and event.key in keys


class SwitchCell(Handler):
    """A mouse click flips the cell under the pointer."""

    def __init__(self, window, grid: Grid) -> None:
        self.window = window
        self.grid = grid

    def matches(self, event: pygame.event.Event) -> bool:
        return event.type == pygame.MOUSEBUTTONDOWN

    def handle(self, event: pygame.event.Event) -> None:
        x, y = event.pos
        row, col = self.window.cell_at(self.grid, x, y)
        self.grid.toggle(row, col)
        self.window.redraw(self.grid)


class TogglePause(Handler):
    """The P key pauses or resumes the simulation."""

    def __init__(self, state: PlayState) -> None:
        self.state = state

    def matches(self, event: pygame.event.Event) -> bool:
        return _is_key(event, pygame.K_p)

    def handle(self, event: pygame.event.Event) -> None:
        self.state.paused = not self.state.paused


class ChangeDelay(Handler):
    """The I key speeds the simulation up, the D key slows it down."""

    def __init__(self, state: PlayState) -> None:
        self.state = state
        # The delay is always recomputed from the starting one to avoid drift.
        self._begin_delay = state.delay
        self._power = 0

    def matches(self, event: pygame.event.Event) -> bool:
        return _is_key(event, pygame.K_i, pygame.K_d)

    def handle(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_i:
            self._power = min(self._power - 1, 10)
        elif event.key == pygame.K_d:
            self._power = max(self._power + 1, -10)
        try:
            delay = int(self._begin_delay * _DELAY_FACTOR**self._power)
        except OverflowError:
            delay = _MAX_DELAY
        self.state.delay = min(_MAX_DELAY, max(_MIN_DELAY, delay))


class FillRandom(Handler):
    """The R key fills the grid at random."""

    def __init__(self, window, grid: Grid, rng: random.Random | None = None) -> None:
        self.window = window
        self.grid = grid
        self.rng = rng

    def matches(self, event: pygame.event.Event) -> bool:
        return _is_key(event, pygame.K_r)

    def handle(self, event: pygame.event.Event) -> None:
        self.grid.fill_random(self.rng)
        self.window.redraw(self.grid)


class ClearGrid(Handler):
    """The C key kills every cell."""

    def __init__(self, window, grid: Grid) -> None:
        self.window = window
        self.grid = grid

    def matches(self, event: pygame.event.Event) -> bool:
        return _is_key(event, pygame.K_c)

    def handle(self, event: pygame.event.Event) -> None:
        self.grid.clear()
        self.window.redraw(self.grid)