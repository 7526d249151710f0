# -*- coding: utf-8 -*-
"""
Terminal implementation of the 2048 sliding tile game.
"""

from .config import GameConfig
from .core import Board, BoardFormatError, Direction, GameOver
from .session import GameSession

__all__ = ["Board", "BoardFormatError", "Direction", "GameOver", "GameConfig", "GameSession"]
