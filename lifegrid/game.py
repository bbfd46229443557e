"""The main loop of the game."""

from __future__ import annotations

import random
from collections.abc import Sequence

import pygame

from lifegrid.config import StrPath, load_config
from lifegrid.events import (
    ChangeDelay,
    ClearGrid,
    FillRandom,
    Handler,
    PlayState,
    SwitchCell,
    TogglePause,
)
from lifegrid.grid import Grid
from lifegrid.window import Window

CONFIG_FILE = "config.txt"


class Game:
    """Owns the window, the grid and the handlers, and runs the event loop."""

    def __init__(self, config_path: StrPath) -> None:
        self.config = load_config(config_path)
        pygame.init()
        self.window = Window("", self.config["width"], self.config["height"])
        self.grid = Grid(self.config["rows"], self.config["cols"])
        self.state = PlayState()
        self.last_update = 0
        rng = random.Random()
        self.handlers: list[Handler] = [
            SwitchCell(self.window, self.grid),
            TogglePause(self.state),
            ChangeDelay(self.state),
            FillRandom(self.window, self.grid, rng),
            ClearGrid(self.window, self.grid),
        ]
        self.window.redraw(self.grid)
        self.update()

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Pass an event to every interested handler; False once the window is closed."""
        running = event.type != pygame.QUIT
        for handler in self.handlers:
            if handler.matches(event):
                handler.handle(event)
        return running

    def update(self) -> None:
        """Advance one generation if running and the delay has passed."""
        now = pygame.time.get_ticks()
        if not self.state.paused and now - self.last_update > self.state.delay:
            self.grid.next_state()
            self.window.redraw(self.grid)
            self.last_update = pygame.time.get_ticks()

    def loop(self) -> None:
        """Run until the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self.dispatch(event):
                    running = False
            self.update()
            pygame.time.wait(1)

    def close(self) -> None:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    with Game(CONFIG_FILE) as game:
        game.loop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())