# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass, field
from pathlib import Path

from numpy.random import Generator, default_rng

from terminal2048.core import STARTING_TILE_COUNT, TILE_SPAWN_AMOUNT

DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 4
DEFAULT_SAVE_NAME = "board.txt"


@dataclass
class GameConfig:
    """Settings used to create boards and persist them."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    starting_tiles: int = STARTING_TILE_COUNT
    spawn_count: int = TILE_SPAWN_AMOUNT
    save_path: Path = field(default_factory=lambda: Path.cwd() / DEFAULT_SAVE_NAME)
    seed: int | None = None

    def __post_init__(self):
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.columns}")
        if self.starting_tiles < 0 or self.spawn_count < 0:
            raise ValueError("Tile counts can't be negative")
        self.save_path = Path(self.save_path)

    def generator(self) -> Generator:
        """Build the random generator for a new board, seeded when a seed is configured."""
        return default_rng(self.seed)
