# lifegrid

Conway's Game of Life in a pygame window. The board wraps around at its
edges, so a glider that leaves on the right comes back on the left.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
lifegrid
```

The same entry point can be started with `python -m lifegrid.game`.

This opens the game window. Settings are read from `config.txt` in the
current directory. If that file is missing or cannot be parsed, the defaults
are used. The file is then written back with the values that were actually
used, followed by a list of the allowed ranges:

```
width 500
height 500
rows 40
cols 40

Ограничения:
100 <= width <= 700
100 <= height <= 700
10 <= rows <= 200
10 <= cols <= 200
```

`width` and `height` are the window size in pixels, `rows` and `cols` the
size of the board. A value outside its range is moved to the nearest limit.
The lines must keep the order shown above; on each line the first word is
taken as the name and the first run of digits as the value. If the file
cannot be written back, a message is printed and the game starts anyway.

## Controls

The game starts paused.

| Input        | Action                                         |
|--------------|------------------------------------------------|
| mouse click  | switch the clicked cell between alive and dead |
| `p`          | pause or resume                                |
| `i`          | run faster (shorter delay between steps)       |
| `d`          | run slower (longer delay between steps)        |
| `r`          | fill the board at random (about 40% alive)     |
| `c`          | clear the board                                |

The delay between steps starts at 300 ms. Each speed change multiplies or
divides it by 1.6. It always stays between 1 ms and 2000 ms. Closing the
window ends the game.

## Using it as a library

The board works without a window:

```python
from lifegrid.grid import Grid

grid = Grid(5, 5)
for col in (1, 2, 3):
    grid.toggle(2, col)
grid.next_state()
print([grid[row][2] for row in range(5)])
```

- `Grid(rows, cols)` has `rows` and `cols`, `grid[i]` (a read-only row),
  `toggle(row, col)`, `clear()`, `fill_random(rng=None)` (takes an optional
  `random.Random`), `alive_neighbours(row, col)` and `next_state()`.
- `lifegrid.config.load_config(path)` returns the settings as a dict in the
  same way the game does, and writes the file back as described above.
  `lifegrid.config.Parser` reads and writes files for any list of parameters
  added with `add_default(name, value, min_value, max_value)`; `read_file`
  raises `ParseError` when the file does not match.
- `lifegrid.events` holds the input handlers (`SwitchCell`, `TogglePause`,
  `ChangeDelay`, `FillRandom`, `ClearGrid`) and the shared `PlayState`.
- `lifegrid.window.Window` draws a grid and maps window coordinates to a
  cell with `cell_at(grid, x, y)`.
- `lifegrid.game.Game(config_path)` ties these together; it is a context
  manager, and `loop()` runs until the window is closed.