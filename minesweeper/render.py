"""Drawing of the Minesweeper window onto an abstract canvas."""

from __future__ import annotations

from typing import Protocol

from .game import FACE_RADIUS, HEADER_HEIGHT, TILE_SIZE, Game

WIN_MESSAGE = "Congratulations, you beat Minesweeper!"

NUMBER_COLORS = {
    1: (0, 0, 255),
    2: (0, 128, 0),
    3: (255, 0, 0),
    4: (0, 0, 128),
    5: (128, 0, 0),
    6: (0, 128, 128),
    7: (0, 0, 0),
    8: (128, 128, 128),
}


class Canvas(Protocol):
    """The drawing operations the game needs."""

    def color(self, red: int, green: int, blue: int) -> None: ...

    def clear(self) -> None: ...

    def fill_rectangle(self, x: int, y: int, w: int, h: int) -> None: ...

    def rectangle(self, x: int, y: int, w: int, h: int) -> None: ...

    def fill_circle(self, xc: int, yc: int, r: int) -> None: ...

    def circle(self, xc: int, yc: int, r: int) -> None: ...

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None: ...

    def arc(self, x: int, y: int, w: int, h: int, a1: int, a2: int) -> None: ...

    def text(self, x: int, y: int, text: str) -> None: ...


def draw_grid(canvas: Canvas, game: Game) -> None:
    """Draw every tile of the board."""
    for row, line in enumerate(game.board):
        for col, tile in enumerate(line):
            x = col * TILE_SIZE
            y = row * TILE_SIZE + HEADER_HEIGHT
            if tile.is_revealed:
                canvas.color(200, 200, 200)
                canvas.fill_rectangle(x, y, TILE_SIZE, TILE_SIZE)
                canvas.color(100, 100, 100)
                canvas.rectangle(x, y, TILE_SIZE, TILE_SIZE)
                if tile.is_mine:
                    canvas.color(0, 0, 0)
                    canvas.fill_circle(x + TILE_SIZE // 2, y + TILE_SIZE // 2, TILE_SIZE // 4)
                elif tile.neighbor_mines > 0:
                    canvas.color(*NUMBER_COLORS[tile.neighbor_mines])
                    canvas.text(
                        x + TILE_SIZE // 3, y + TILE_SIZE * 2 // 3, str(tile.neighbor_mines)
                    )
            else:
                canvas.color(169, 169, 169)
                canvas.fill_rectangle(x, y, TILE_SIZE, TILE_SIZE)
                canvas.color(100, 100, 100)
                canvas.rectangle(x, y, TILE_SIZE, TILE_SIZE)
                if tile.is_flagged:
                    canvas.color(255, 0, 0)
                    canvas.text(x + TILE_SIZE // 2 - 3, y + TILE_SIZE // 2 + 3, "F")


def draw_header(canvas: Canvas, game: Game) -> None:
    """Draw the mine counter and the face button."""
    canvas.color(180, 180, 180)
    canvas.fill_rectangle(0, 0, game.width, HEADER_HEIGHT)
    canvas.color(0, 0, 0)
    canvas.text(10, 20, f"Mines Remaining: {game.mines_remaining()}")

    r = FACE_RADIUS
    face_x = game.width // 2 - r
    face_y = HEADER_HEIGHT // 2 - r
    canvas.color(255, 255, 0)
    canvas.fill_circle(face_x + r, face_y + r, r)
    canvas.color(0, 0, 0)
    canvas.circle(face_x + r, face_y + r, r)
    if not game.game_over:
        canvas.fill_circle(face_x + 8, face_y + 10, 2)
        canvas.fill_circle(face_x + 16, face_y + 10, 2)
        canvas.arc(face_x + 6, face_y + 6, 12, 12, 225, 90)
    else:
        canvas.line(face_x + 6, face_y + 8, face_x + 8, face_y + 10)
        canvas.line(face_x + 8, face_y + 8, face_x + 6, face_y + 10)
        canvas.line(face_x + 16, face_y + 8, face_x + 18, face_y + 10)
        canvas.line(face_x + 18, face_y + 8, face_x + 16, face_y + 10)
        canvas.arc(face_x + 6, face_y + 14, 12, 12, 45, 90)


def draw_win(canvas: Canvas, game: Game) -> None:
    """Replace the window with the victory message."""
    canvas.color(0, 0, 0)
    canvas.clear()
    canvas.color(0, 255, 0)
    canvas.text(game.width // 2 - 100, game.height // 2, WIN_MESSAGE)


def draw_game(canvas: Canvas, game: Game) -> None:
    """Redraw the whole window for the current state."""
    if game.won:
        draw_win(canvas, game)
        return
    canvas.clear()
    draw_header(canvas, game)
    draw_grid(canvas, game)