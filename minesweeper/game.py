"""Minesweeper board state and rules."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

TILE_SIZE = 18
GRID_ROWS = 16
GRID_COLS = 30
HEADER_HEIGHT = 60
NUM_MINES = 50
FACE_RADIUS = 12


@dataclass
class Tile:
    """One square of the board."""

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0


class ClickMode(Enum):
    """How a click on the board is interpreted."""

    REVEAL = "reveal"
    FLAG = "flag"


class ClickResult(Enum):
    """What a click did to the game."""

    IGNORED = "ignored"
    RESET = "reset"
    FLAGGED = "flagged"
    REVEALED = "revealed"
    LOST = "lost"
    WON = "won"


def _neighbors(row: int, col: int):
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr or dc:
                yield row + dr, col + dc


class Game:
    """A game of Minesweeper whose mines are laid on the first reveal."""

    def __init__(
        self,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        mines: int = NUM_MINES,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the board needs at least one row and one column")
        if mines < 0:
            raise ValueError("the number of mines cannot be negative")
        safe_zone = min(3, rows) * min(3, cols)
        if mines > rows * cols - safe_zone:
            raise ValueError(
                f"{mines} mines do not fit on a {rows}x{cols} board "
                "with a safe first click"
            )
        self.rows = rows
        self.cols = cols
        self.mines = mines
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    @property
    def width(self) -> int:
        """Window width in pixels."""
        return self.cols * TILE_SIZE

    @property
    def height(self) -> int:
        """Window height in pixels, header included."""
        return self.rows * TILE_SIZE + HEADER_HEIGHT

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _tiles(self):
        for line in self.board:
            yield from line

    def reset(self) -> None:
        """Start a fresh game with an empty, hidden board."""
        self.board = [[Tile() for _ in range(self.cols)] for _ in range(self.rows)]
        self.total_flags = 0
        self.game_over = False
        self.won = False
        self.first_click = True

    def place_mines(self, safe_row: int, safe_col: int) -> None:
        """Lay mines at random, keeping the 3x3 area around the safe tile clear."""
        candidates = [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if not self.board[row][col].is_mine
            and not (abs(row - safe_row) <= 1 and abs(col - safe_col) <= 1)
        ]
        if len(candidates) < self.mines:
            raise ValueError("not enough free tiles to place every mine")
        for row, col in self.rng.sample(candidates, self.mines):
            self.board[row][col].is_mine = True

    def count_neighbor_mines(self) -> None:
        """Store on each safe tile the number of mines around it."""
        for row, line in enumerate(self.board):
            for col, tile in enumerate(line):
                if tile.is_mine:
                    continue
                tile.neighbor_mines = sum(
                    1
                    for nr, nc in _neighbors(row, col)
                    if self._in_bounds(nr, nc) and self.board[nr][nc].is_mine
                )

    def reveal(self, row: int, col: int) -> None:
        """Reveal a tile, spreading through tiles that touch no mine."""
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            if not self._in_bounds(r, c):
                continue
            tile = self.board[r][c]
            if tile.is_revealed or tile.is_flagged:
                continue
            tile.is_revealed = True
            if tile.neighbor_mines == 0:
                pending.extend(_neighbors(r, c))

    def reveal_all_mines(self) -> None:
        """Uncover every mine on the board."""
        for tile in self._tiles():
            if tile.is_mine:
                tile.is_revealed = True

    def is_won(self) -> bool:
        """True when every safe tile has been revealed."""
        return all(tile.is_revealed or tile.is_mine for tile in self._tiles())

    def mines_remaining(self) -> int:
        """Mines left to flag, as shown by the counter."""
        return self.mines - self.total_flags

    def handle_click(self, x: int, y: int, mode: ClickMode = ClickMode.REVEAL) -> ClickResult:
        """Apply a click at window coordinates (x, y)."""
        if y < HEADER_HEIGHT:
            dx = x - self.width // 2
            dy = y - HEADER_HEIGHT // 2
            if dx * dx + dy * dy <= FACE_RADIUS * FACE_RADIUS:
                self.reset()
                return ClickResult.RESET
            return ClickResult.IGNORED

        if self.game_over:
            return ClickResult.IGNORED

        row = (y - HEADER_HEIGHT) // TILE_SIZE
        col = x // TILE_SIZE
        if not self._in_bounds(row, col):
            return ClickResult.IGNORED
        tile = self.board[row][col]

        if mode is ClickMode.FLAG and self.total_flags <= self.mines:
            if tile.is_revealed:
                return ClickResult.IGNORED
            tile.is_flagged = not tile.is_flagged
            self.total_flags += 1 if tile.is_flagged else -1
            return ClickResult.FLAGGED

        if tile.is_flagged or tile.is_revealed:
            return ClickResult.IGNORED
        if self.first_click:
            self.place_mines(row, col)
            self.count_neighbor_mines()
            self.first_click = False
        if tile.is_mine:
            self.reveal_all_mines()
            self.game_over = True
            return ClickResult.LOST
        self.reveal(row, col)
        if self.is_won():
            self.game_over = True
            self.won = True
            return ClickResult.WON
        return ClickResult.REVEALED