"""
The 2048 game board: grid state, moves, tile spawning and game over detection.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass
from os import PathLike
from typing import NamedTuple

from numpy import argwhere, array_equal, asarray, int64, ndarray, sort, zeros
from numpy.random import Generator, default_rng

from terminal2048.core.gamemove import Direction, shift
from terminal2048.core.storage import read_grid, write_grid

logger = logging.getLogger(__name__)

# ##: Number of tiles placed on a new board, and after each move.
STARTING_TILE_COUNT = 2
TILE_SPAWN_AMOUNT = 1

# ##>: A draw in [1, 9] above this threshold spawns a 4 instead of a 2.
_FOUR_THRESHOLD = 8

# ##>: Order in which the probe moves are applied when the board is full.
_PROBE_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Position(NamedTuple):
    """A cell of the grid."""

    row: int
    column: int


@dataclass(frozen=True)
class GameOver:
    """Signal produced when no move can change a full board."""

    score: int = 0


class Board:
    """
    A rectangular 2048 board.

    The grid holds ``0`` for empty cells and a power of two for every tile. Its shape is fixed at
    construction. The board is a plain mutable object without locking: callers sharing it between
    threads must serialise their calls.

    Attributes
    ----------
    rows : int
        Number of rows of the grid.
    columns : int
        Number of columns of the grid.
    grid : ndarray
        The ``rows x columns`` array of tile values. Assigning an array of another shape
        raises ``ValueError``.
    game_over : GameOver or None
        The last game over signal detected while spawning, if any.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        rng: Generator | None = None,
        starting_tiles: int = STARTING_TILE_COUNT,
        spawn_count: int = TILE_SPAWN_AMOUNT,
    ):
        """
        Create an empty board and place the starting tiles.

        Parameters
        ----------
        rows : int
            Number of rows, must be positive.
        columns : int
            Number of columns, must be positive.
        rng : Generator, optional
            Random source used to place tiles. A fresh unseeded generator is used by default.
        starting_tiles : int, optional
            Number of tiles spawned on the new board (default is 2).
        spawn_count : int, optional
            Number of tiles spawned after each move (default is 1).

        Raises
        ------
        ValueError
            If a dimension is not positive.
        """
        if rows <= 0 or columns <= 0:
            raise ValueError(f'Board dimensions must be positive, got {rows}x{columns}')

        self.rows = rows
        self.columns = columns
        self.spawn_count = spawn_count
        self._grid: ndarray = zeros((rows, columns), dtype=int64)
        self.game_over: GameOver | None = None
        self._rng = rng if rng is not None else default_rng()

        if starting_tiles:
            self.spawn_tiles(starting_tiles)

    @property
    def grid(self) -> ndarray:
        """The ``rows x columns`` array of tile values."""
        return self._grid

    @grid.setter
    def grid(self, value: ndarray) -> None:
        value = asarray(value, dtype=int64)
        if value.shape != (self.rows, self.columns):
            raise ValueError(f'Grid must be {self.rows}x{self.columns}, got shape {value.shape}')
        self._grid = value

    def empty_cells(self) -> list[Position]:
        """
        List the empty cells of the grid, row by row.

        Returns
        -------
        list[Position]
            Positions of every cell holding ``0``.
        """
        return [Position(int(row), int(column)) for row, column in argwhere(self.grid == 0)]

    def spawn_tiles(self, count: int) -> GameOver | None:
        """
        Place new tiles on empty cells, or detect the end of the game on a full board.

        Parameters
        ----------
        count : int
            Number of tiles to place.

        Returns
        -------
        GameOver or None
            The game over signal when the board is full and no move changes it.

        Notes
        -----
        - Positions are drawn from the empty cells found at the start of the call, so two draws
          may land on the same cell.
        - A new tile is a 2 with probability 8/9 and a 4 with probability 1/9.
        - On a full board the probe moves are applied one after the other to the same copy, then
          the result is compared with the current grid.
        """
        empty = self.empty_cells()
        if not empty:
            return self._check_game_over()

        for _ in range(count):
            position = empty[self._rng.integers(len(empty))]
            value = 2 if self._rng.integers(1, 10) <= _FOUR_THRESHOLD else 4
            self.grid[position.row, position.column] = value
            logger.debug('Spawned %d at %s', value, tuple(position))
        return None

    def _check_game_over(self) -> GameOver | None:
        probe = self.clone()
        for direction in _PROBE_ORDER:
            probe.move(direction, spawn=False)

        if not array_equal(probe.grid, self.grid):
            return None

        logger.warning('No move left on the board, highest tile %d', self.highest_value())
        self.game_over = GameOver(score=0)
        return self.game_over

    def move(self, direction: Direction, spawn: bool = True) -> GameOver | None:
        """
        Push every tile towards an edge, merging equal neighbours, then spawn a new tile.

        Parameters
        ----------
        direction : Direction
            The edge the tiles travel towards.
        spawn : bool, optional
            Whether to spawn a tile after the move (default is True).

        Returns
        -------
        GameOver or None
            The game over signal detected by the spawn step, if any.
        """
        self.grid = shift(self.grid, Direction(direction))
        logger.debug('Moved %s', Direction(direction).name)
        if spawn:
            return self.spawn_tiles(self.spawn_count)
        return None

    def highest_value(self) -> int:
        """Return the highest tile on the board, 0 when it is empty."""
        return int(self.grid.max())

    def auto_chain(self) -> None:
        """
        Rearrange every tile in descending order along a serpentine path.

        The first row is filled left to right, the second right to left, and so on. Nothing is
        merged; empty cells end up at the end of the path.
        """
        ordered = sort(self.grid, axis=None)[::-1].reshape(self.rows, self.columns)
        ordered[1::2] = ordered[1::2, ::-1]
        self.grid = ordered.copy()

    def clone(self) -> 'Board':
        """
        Copy the board, including its random generator state.

        Returns
        -------
        Board
            An independent board sharing no mutable state with this one.
        """
        board = Board(
            self.rows, self.columns, rng=deepcopy(self._rng), starting_tiles=0, spawn_count=self.spawn_count
        )
        board.grid = self.grid.copy()
        board.game_over = self.game_over
        return board

    def save(self, path: str | PathLike) -> None:
        """Write the grid to a text file, one comma separated line per row."""
        write_grid(path, self.grid)

    @classmethod
    def load(
        cls, path: str | PathLike, rng: Generator | None = None, spawn_count: int = TILE_SPAWN_AMOUNT
    ) -> 'Board':
        """
        Build a board from a file written by ``save``.

        Parameters
        ----------
        path : str or PathLike
            The file to read.
        rng : Generator, optional
            Random source of the new board.
        spawn_count : int, optional
            Number of tiles spawned after each move (default is 1).

        Returns
        -------
        Board
            A board whose shape and tiles match the file exactly.

        Raises
        ------
        BoardFormatError
            If the file content is not a valid board.
        OSError
            If the file cannot be read.
        """
        grid = read_grid(path)
        board = cls(grid.shape[0], grid.shape[1], rng=rng, spawn_count=spawn_count)
        board.grid[:, :] = grid
        return board

    def __str__(self) -> str:
        width = len(str(self.highest_value())) + 1
        lines = []
        for row in self.grid.tolist():
            lines.append(''.join(_center(str(value), width) for value in row))
        return ''.join(line + '\n' for line in lines)


def _center(text: str, width: int) -> str:
    # ##>: Padding alternates front then back, so the front gets the extra space.
    padding = max(width - len(text), 0)
    front = (padding + 1) // 2
    return ' ' * front + text + ' ' * (padding - front)
