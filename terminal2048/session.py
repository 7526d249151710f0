# -*- coding: utf-8 -*-
"""
Game session: the state a host keeps around the active board.

The session owns the active board, an optional saved snapshot and the game over flag. Every operation
holds the session lock, so a foreground loop and a background driver can share one session.
"""
import logging
import threading
from os import PathLike

from terminal2048.config import GameConfig
from terminal2048.core import Board, Direction, GameOver

logger = logging.getLogger(__name__)


class GameSession:
    """
    Active game of a host.

    Parameters
    ----------
    config : GameConfig, optional
        Settings used for new boards and for the default save file.
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else GameConfig()
        self._lock = threading.Lock()
        self._snapshot: Board | None = None
        self.board: Board = self._new_board()
        self.game_over = False

    def _new_board(self) -> Board:
        return Board(
            self.config.rows,
            self.config.columns,
            rng=self.config.generator(),
            starting_tiles=self.config.starting_tiles,
            spawn_count=self.config.spawn_count,
        )

    @property
    def has_snapshot(self) -> bool:
        """Whether a snapshot is available to restore."""
        return self._snapshot is not None

    def new_game(self) -> None:
        """Replace the active board with a fresh one and clear the game over flag."""
        with self._lock:
            self.board = self._new_board()
            self.game_over = False
            logger.info("Started a %dx%d game", self.config.rows, self.config.columns)

    def move(self, direction: Direction) -> GameOver | None:
        """
        Play a move on the active board.

        Parameters
        ----------
        direction : Direction
            The edge the tiles travel towards.

        Returns
        -------
        GameOver or None
            The game over signal, when the move left the board stuck.
        """
        with self._lock:
            signal = self.board.move(direction)
            if signal is not None:
                self.game_over = True
            return signal

    def auto_chain(self) -> None:
        """Rearrange the active board along its serpentine path."""
        with self._lock:
            self.board.auto_chain()

    def snapshot(self) -> None:
        """Keep a copy of the active board to restore later."""
        with self._lock:
            self._snapshot = self.board.clone()
            logger.info("Saved a snapshot, highest tile %d", self._snapshot.highest_value())

    def restore(self) -> None:
        """
        Install a copy of the saved snapshot as the active board.

        Raises
        ------
        RuntimeError
            If no snapshot has been saved.
        """
        with self._lock:
            if self._snapshot is None:
                raise RuntimeError("No snapshot to restore")
            self.board = self._snapshot.clone()
            self.game_over = self.board.game_over is not None
            logger.info("Restored the snapshot")

    def save(self, path: str | PathLike | None = None) -> None:
        """Write the active board to a file, the configured save path by default."""
        target = path if path is not None else self.config.save_path
        try:
            with self._lock:
                self.board.save(target)
        except OSError as error:
            logger.error("Could not save the board to %s: %s", target, error)
            raise
        logger.info("Saved the board to %s", target)

    def load(self, path: str | PathLike | None = None) -> None:
        """
        Replace the active board with one read from a file.

        The previous board stays active when the file can't be read or parsed.

        Raises
        ------
        BoardFormatError
            If the file content is not a valid board.
        OSError
            If the file cannot be read.
        """
        source = path if path is not None else self.config.save_path
        try:
            board = Board.load(source, rng=self.config.generator(), spawn_count=self.config.spawn_count)
        except (OSError, ValueError) as error:
            logger.error("Could not load a board from %s: %s", source, error)
            raise

        with self._lock:
            self.board = board
            self.game_over = False
        logger.info("Loaded a %dx%d board from %s", board.rows, board.columns, source)

    def highest_value(self) -> int:
        """Return the highest tile of the active board."""
        with self._lock:
            return self.board.highest_value()

    def render(self) -> str:
        """
        Describe the active board as text.

        Returns
        -------
        str
            The highest tile, a game over line when the game is finished, then the grid.
        """
        with self._lock:
            lines = [f"Highest Tile: {self.board.highest_value()}"]
            if self.game_over:
                lines.append("Game Over!")
            return "\n".join(lines) + "\n" + str(self.board)
