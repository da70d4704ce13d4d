import random

import pytest

from minesweeper.game import (
    HEADER_HEIGHT,
    NUM_MINES,
    TILE_SIZE,
    ClickMode,
    ClickResult,
    Game,
)


def _point(row, col):
    return col * TILE_SIZE + 1, HEADER_HEIGHT + row * TILE_SIZE + 1


def _armed(rows, cols, mine_cells):
    game = Game(rows, cols, 0, random.Random(1))
    game.mines = len(mine_cells)
    for row, col in mine_cells:
        game.board[row][col].is_mine = True
    game.count_neighbor_mines()
    game.first_click = False
    return game


def test_defaults():
    game = Game()
    assert game.rows * game.cols == len([t for line in game.board for t in line])
    assert game.mines_remaining() == NUM_MINES
    assert game.first_click is True


def test_first_click_is_safe_and_places_all_mines():
    game = Game(rng=random.Random(7))
    x, y = _point(5, 10)
    result = game.handle_click(x, y, ClickMode.REVEAL)
    assert result in (ClickResult.REVEALED, ClickResult.WON)
    mines = [(r, c) for r, line in enumerate(game.board) for c, t in enumerate(line) if t.is_mine]
    assert len(mines) == NUM_MINES
    assert all(abs(r - 5) > 1 or abs(c - 10) > 1 for r, c in mines)
    assert game.board[5][10].neighbor_mines == 0
    assert game.first_click is False


def test_neighbor_counts_for_corner_mine():
    game = _armed(3, 3, [(0, 0)])
    assert game.board[0][1].neighbor_mines == 1
    assert game.board[1][1].neighbor_mines == 1
    assert game.board[2][2].neighbor_mines == 0


def test_flood_fill_reveals_empty_board():
    game = _armed(4, 5, [])
    game.reveal(0, 0)
    assert all(t.is_revealed for line in game.board for t in line)
    assert game.is_won()


def test_reveal_out_of_bounds_is_noop():
    game = _armed(3, 3, [(0, 0)])
    game.reveal(-1, 5)
    assert not any(t.is_revealed for line in game.board for t in line)


def test_flag_toggle_updates_counter():
    game = _armed(3, 3, [(0, 0)])
    x, y = _point(2, 2)
    assert game.handle_click(x, y, ClickMode.FLAG) is ClickResult.FLAGGED
    assert game.board[2][2].is_flagged
    assert game.mines_remaining() == game.mines - 1
    game.handle_click(x, y, ClickMode.FLAG)
    assert not game.board[2][2].is_flagged
    assert game.mines_remaining() == game.mines


def test_flagged_tile_is_not_revealed():
    game = _armed(3, 3, [(0, 0)])
    x, y = _point(2, 2)
    game.handle_click(x, y, ClickMode.FLAG)
    assert game.handle_click(x, y, ClickMode.REVEAL) is ClickResult.IGNORED
    assert not game.board[2][2].is_revealed


def test_clicking_mine_loses():
    game = _armed(3, 3, [(0, 0), (2, 2)])
    x, y = _point(0, 0)
    assert game.handle_click(x, y) is ClickResult.LOST
    assert game.game_over and not game.won
    assert game.board[2][2].is_revealed
    assert game.handle_click(*_point(1, 1)) is ClickResult.IGNORED
    assert not game.board[1][1].is_revealed


def test_winning_click():
    game = _armed(3, 3, [(0, 0)])
    result = game.handle_click(*_point(2, 2))
    assert result is ClickResult.WON
    assert game.won and game.game_over


def test_smiley_click_resets():
    game = _armed(3, 3, [(0, 0)])
    game.handle_click(*_point(0, 0))
    assert game.game_over
    assert game.handle_click(game.width // 2, HEADER_HEIGHT // 2) is ClickResult.RESET
    assert not game.game_over
    assert game.first_click
    assert not any(t.is_mine for line in game.board for t in line)


def test_header_click_away_from_face_is_ignored():
    game = Game(rng=random.Random(3))
    assert game.handle_click(0, 0) is ClickResult.IGNORED


@pytest.mark.parametrize("rows,cols,mines", [(3, 3, 1), (0, 4, 0), (4, 4, -1)])
def test_invalid_configuration(rows, cols, mines):
    with pytest.raises(ValueError):
        Game(rows, cols, mines)