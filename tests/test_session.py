"""
Tests for the game session kept by a host around the active board.
"""

import threading

import numpy as np
import pytest

from terminal2048.config import GameConfig
from terminal2048.core import BoardFormatError, Direction, GameOver
from terminal2048.session import GameSession

STUCK_GRID = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


@pytest.fixture
def config(tmp_path):
    return GameConfig(seed=42, save_path=tmp_path / 'board.txt')


@pytest.fixture
def session(config):
    return GameSession(config)


class TestConfig:
    def test_defaults(self):
        config = GameConfig()
        assert (config.rows, config.columns) == (4, 4)
        assert (config.starting_tiles, config.spawn_count) == (2, 1)
        assert config.save_path.name == 'board.txt'

    @pytest.mark.parametrize('kwargs', [{'rows': 0}, {'columns': -3}, {'spawn_count': -1}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_seeded_generator(self):
        config = GameConfig(seed=3)
        assert config.generator().integers(1000) == config.generator().integers(1000)


class TestSession:
    def test_new_session(self, session):
        assert session.board.grid.shape == (4, 4)
        assert np.count_nonzero(session.board.grid) == 2
        assert not session.game_over
        assert not session.has_snapshot

    def test_game_over_flag(self, session):
        session.board.grid = STUCK_GRID.copy()
        assert session.move(Direction.LEFT) == GameOver(score=0)
        assert session.game_over
        assert 'Game Over!' in session.render()

        session.new_game()
        assert not session.game_over
        assert np.count_nonzero(session.board.grid) == 2

    def test_render(self, session):
        session.board.grid = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 128]])
        lines = session.render().splitlines()
        assert lines[0] == 'Highest Tile: 128'
        assert len(lines) == 5
        assert lines[1] == '  2   0   0   0 '

    def test_auto_chain(self, session):
        session.board.grid = np.array([[0, 0, 0, 0], [0, 2, 0, 0], [0, 0, 8, 0], [0, 0, 0, 4]])
        session.auto_chain()
        np.testing.assert_array_equal(session.board.grid[0], [8, 4, 2, 0])
        assert session.highest_value() == 8

    def test_snapshot_and_restore(self, session):
        session.snapshot()
        saved = session.board.grid.copy()
        session.move(Direction.UP)
        session.move(Direction.RIGHT)

        session.restore()
        np.testing.assert_array_equal(session.board.grid, saved)

        # ##>: The snapshot is still intact after playing on the restored board.
        session.board.grid[0, 0] = 512
        session.restore()
        np.testing.assert_array_equal(session.board.grid, saved)

    def test_restore_without_snapshot(self, session):
        with pytest.raises(RuntimeError):
            session.restore()

    def test_save_and_load_default_path(self, session, config):
        session.save()
        assert config.save_path.exists()
        saved = session.board.grid.copy()

        session.new_game()
        session.load()
        np.testing.assert_array_equal(session.board.grid, saved)

    def test_failed_load_keeps_board(self, session, tmp_path):
        path = tmp_path / 'broken.txt'
        path.write_text('2,4\nnope\n')
        board = session.board
        with pytest.raises(BoardFormatError):
            session.load(path)
        assert session.board is board

        with pytest.raises(OSError):
            session.load(tmp_path / 'missing.txt')
        assert session.board is board

    def test_failed_save(self, session, tmp_path):
        with pytest.raises(OSError):
            session.save(tmp_path / 'missing' / 'board.txt')

    def test_threads_share_session(self, session):
        """Moves issued from several threads keep the board consistent."""

        def play(direction):
            for _ in range(50):
                session.move(direction)
                session.auto_chain()

        threads = [threading.Thread(target=play, args=(direction,)) for direction in Direction]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert session.board.grid.shape == (4, 4)
        assert np.all(np.isin(session.board.grid, [0] + [2**power for power in range(1, 20)]))
