# minesweeper

The classic Minesweeper puzzle in a small Tk window. By default the board
is 30 columns by 16 rows with 50 mines. Your first reveal is always safe,
because no mine is placed on that tile or on the tiles around it.

## Installing

```
pip install .
```

The game uses Tkinter from the standard library, so your Python needs Tk
support.

## Playing

```
minesweeper
```

You can also start it with `python -m minesweeper.app`.

Options:

- `--rows N`: the number of rows on the board. The default is 16.
- `--cols N`: the number of columns on the board. The default is 30.
- `--mines N`: the number of mines. The default is 50.
- `--seed N`: the seed for mine placement, so the same layout can be
  played again.

If the mines cannot fit on the board with a safe area around the first
reveal, the command prints an error and exits with status 2.

Controls:

- **Left click** a covered tile to reveal it. If the tile has no
  neighbouring mines, the area around it opens up as well.
- Point at a covered tile and press **f** to put a flag on it or take a
  flag off. A flagged tile cannot be revealed. The header shows how many
  mines are left, which is the number of mines minus the flags you have
  placed.
- Click the **face** in the header to start a new game at any time.
- Press **q** to quit.

If you reveal a mine, all the mines are shown, the face gets crossed-out
eyes and a frown, and the board stops responding until you click the face.
If you reveal every tile that has no mine, the window is replaced by a
congratulations message.

## Using it as a library

The game logic is in `minesweeper.game`. It has no graphical part, so
you can drive it directly:

```python
import random
from minesweeper.game import Game, ClickMode

game = Game(16, 30, 50, random.Random(1))
result = game.handle_click(100, 120, ClickMode.REVEAL)
print(result, game.mines_remaining(), game.is_won())
```

`Game.handle_click` takes window pixel coordinates, which include the
header, and returns a `ClickResult`: `IGNORED`, `RESET`, `FLAGGED`,
`REVEALED`, `LOST` or `WON`. The board is `game.board`, a list of rows of
`Tile` objects. Each `Tile` has the fields `is_mine`, `is_revealed`,
`is_flagged` and `neighbor_mines`. `Game` also has `reset`, `place_mines`,
`count_neighbor_mines`, `reveal`, `reveal_all_mines`, `is_won` and
`mines_remaining`, and its `width` and `height` give the window size in
pixels.

Drawing is in `minesweeper.render`. `draw_game`, `draw_grid`,
`draw_header` and `draw_win` draw onto any object that provides the
`Canvas` drawing methods (`color`, `clear`, `fill_rectangle`,
`rectangle`, `fill_circle`, `circle`, `line`, `arc`, `text`).
`minesweeper.app.TkCanvas` provides them on a Tk canvas.

## Running the tests

```
pip install .[test]
pytest
```