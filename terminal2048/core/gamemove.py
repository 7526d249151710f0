"""
Move utilities for the 2048 board: the four directions and the slide and merge passes.

Every pass is written for a single orientation (tiles travelling towards the left edge). The
other directions rotate the grid so their target edge becomes the left edge, apply the pass and
rotate back.
"""

from enum import IntEnum

from numpy import ndarray, rot90, zeros_like


class Direction(IntEnum):
    """
    The four directions a move can push the tiles towards.

    The value of each member is the number of counter-clockwise quarter turns that bring its
    target edge onto the left edge.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        """
        Look up a direction from its name, ignoring case and surrounding spaces.

        Parameters
        ----------
        name : str
            Name of the direction (``"up"``, ``"Left"``, ...).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name matches no direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None


def slide_left(board: ndarray) -> ndarray:
    """
    Pack every non-empty tile against the left edge, without merging.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    ndarray
        A new board where each row keeps its tiles in order, followed by empty cells.
    """
    result = zeros_like(board)
    for i, row in enumerate(board):
        tiles = row[row != 0]
        result[i, : len(tiles)] = tiles
    return result


def merge_left(board: ndarray) -> ndarray:
    """
    Merge adjacent equal tiles of each row in one pass starting from the left edge.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array, usually already slid to the left.

    Returns
    -------
    ndarray
        A new board with the merges applied. Gaps left by merged tiles are not closed.

    Notes
    -----
    - When two neighbours are equal, the one nearer the edge doubles and the other becomes empty.
    - The scan is not repeated, so ``[2, 2, 2, 0]`` becomes ``[4, 0, 2, 0]``.
    """
    result = board.copy()
    for row in result:
        for j in range(len(row) - 1):
            if row[j] == row[j + 1]:
                row[j] *= 2
                row[j + 1] = 0
    return result


def shift(board: ndarray, direction: Direction) -> ndarray:
    """
    Apply a full move to the board: slide, merge, then slide again to close the gaps.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array. It is not modified.
    direction : Direction
        The edge the tiles travel towards.

    Returns
    -------
    ndarray
        A new board, with the same shape, after the move.
    """
    turns = int(direction)
    rotated = rot90(board, k=turns)
    moved = slide_left(merge_left(slide_left(rotated)))
    return rot90(moved, k=-turns).copy()
