"""Windowed Minesweeper using tkinter."""

from __future__ import annotations

import argparse
import random
import sys

from .game import GRID_COLS, GRID_ROWS, NUM_MINES, ClickMode, Game
from .render import draw_game


def hex_color(red: int, green: int, blue: int) -> str:
    """Format an RGB triple as a Tk colour string."""
    for component in (red, green, blue):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component} is outside 0-255")
    return f"#{red:02x}{green:02x}{blue:02x}"


class TkCanvas:
    """A drawing surface over a tkinter canvas with a current colour."""

    def __init__(self, root, width: int, height: int) -> None:
        import tkinter

        self.widget = tkinter.Canvas(
            root, width=width, height=height, background="black", highlightthickness=0
        )
        self.widget.pack()
        self._color = "white"

    def color(self, red: int, green: int, blue: int) -> None:
        self._color = hex_color(red, green, blue)

    def clear(self) -> None:
        self.widget.delete("all")

    def fill_rectangle(self, x: int, y: int, w: int, h: int) -> None:
        self.widget.create_rectangle(x, y, x + w, y + h, fill=self._color, outline=self._color)

    def rectangle(self, x: int, y: int, w: int, h: int) -> None:
        self.widget.create_rectangle(x, y, x + w, y + h, outline=self._color)

    def fill_circle(self, xc: int, yc: int, r: int) -> None:
        self.widget.create_oval(
            xc - r, yc - r, xc + r, yc + r, fill=self._color, outline=self._color
        )

    def circle(self, xc: int, yc: int, r: int) -> None:
        self.widget.create_oval(xc - r, yc - r, xc + r, yc + r, outline=self._color)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.widget.create_line(x1, y1, x2, y2, fill=self._color)

    def arc(self, x: int, y: int, w: int, h: int, a1: int, a2: int) -> None:
        self.widget.create_arc(
            x, y, x + w, y + h, start=a1, extent=a2, style="arc", outline=self._color
        )

    def text(self, x: int, y: int, text: str) -> None:
        self.widget.create_text(x, y, text=text, anchor="sw", fill=self._color)


def parse_args(argv=None) -> argparse.Namespace:
    """Read the board settings from the command line."""
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play Minesweeper.")
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help="rows on the board")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help="columns on the board")
    parser.add_argument("--mines", type=int, default=NUM_MINES, help="number of mines")
    parser.add_argument("--seed", type=int, default=None, help="seed for mine placement")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the game window; left click reveals, 'f' flags, 'q' quits."""
    args = parse_args(argv)
    try:
        game = Game(args.rows, args.cols, args.mines, random.Random(args.seed))
    except ValueError as exc:
        print(f"minesweeper: {exc}", file=sys.stderr)
        return 2

    import tkinter

    root = tkinter.Tk()
    root.title("Minesweeper")
    root.resizable(False, False)
    canvas = TkCanvas(root, game.width, game.height)

    def click(event, mode: ClickMode) -> None:
        game.handle_click(event.x, event.y, mode)
        draw_game(canvas, game)

    canvas.widget.bind("<Button-1>", lambda event: click(event, ClickMode.REVEAL))
    canvas.widget.bind("<KeyPress-f>", lambda event: click(event, ClickMode.FLAG))
    canvas.widget.bind("<KeyPress-q>", lambda event: root.destroy())
    canvas.widget.focus_set()

    draw_game(canvas, game)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())