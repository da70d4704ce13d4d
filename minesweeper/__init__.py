"""Minesweeper: board logic, drawing and a Tk front end."""

__version__ = "1.0.0"
__all__ = ["app", "game", "render"]