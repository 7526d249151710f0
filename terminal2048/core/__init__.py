# -*- coding: utf-8 -*-
"""
This module provides the 2048 board and the helpers it is built on.

It includes the board state machine (moves, tile spawning, game over detection, serpentine
rearrangement, cloning), the directions and slide/merge passes, and the plain text persistence.
"""

from .gameboard import STARTING_TILE_COUNT, TILE_SPAWN_AMOUNT, Board, GameOver, Position
from .gamemove import Direction, merge_left, shift, slide_left
from .storage import BoardFormatError, read_grid, write_grid

__all__ = [
    "Board",
    "GameOver",
    "Position",
    "Direction",
    "STARTING_TILE_COUNT",
    "TILE_SPAWN_AMOUNT",
    "slide_left",
    "merge_left",
    "shift",
    "BoardFormatError",
    "read_grid",
    "write_grid",
]
