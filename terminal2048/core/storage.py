"""
Plain text persistence for game boards: one line per row, tile values separated by commas.
"""

import logging
import re
from os import PathLike
from pathlib import Path

from numpy import array, int64, ndarray, savetxt

logger = logging.getLogger(__name__)

# ##>: A tile value is a plain run of ASCII digits.
_FIELD = re.compile(r'[0-9]+')


class BoardFormatError(ValueError):
    """Raised when a saved board cannot be parsed back into a grid."""


def write_grid(path: str | PathLike, grid: ndarray) -> None:
    """
    Write a grid to a text file.

    Parameters
    ----------
    path : str or PathLike
        Destination file. Overwritten if it exists.
    grid : ndarray
        The 2D grid of tile values.
    """
    savetxt(path, grid, fmt='%d', delimiter=',')
    logger.debug('Wrote %dx%d grid to %s', grid.shape[0], grid.shape[1], path)


def read_grid(path: str | PathLike) -> ndarray:
    """
    Read a grid written by ``write_grid``.

    Parameters
    ----------
    path : str or PathLike
        Source file.

    Returns
    -------
    ndarray
        The 2D grid of tile values, as ``int64``.

    Raises
    ------
    BoardFormatError
        If the file is empty or not UTF-8, has a blank line, holds a field that is not a
        non-negative integer or does not fit in int64, or its rows have different lengths.
    OSError
        If the file cannot be read.
    """
    try:
        rows = Path(path).read_text(encoding='utf-8').splitlines()
    except UnicodeDecodeError as error:
        raise BoardFormatError(f'{path} is not a text file: {error}') from error
    if not rows:
        raise BoardFormatError(f'{path} holds no board')

    # ##: splitlines drops the newline ending the last row, so any empty line is a gap.
    values = []
    for number, line in enumerate(rows, start=1):
        fields = line.split(',')
        if not all(_FIELD.fullmatch(field) for field in fields):
            raise BoardFormatError(f'{path} line {number} is not a row of tile values: {line!r}')
        values.append([int(field) for field in fields])

    # ##: Every row must be as long as the first one.
    columns = len(values[0])
    if any(len(row) != columns for row in values):
        raise BoardFormatError(f'{path} has rows of different lengths')

    try:
        return array(values, dtype=int64)
    except OverflowError as error:
        raise BoardFormatError(f'{path} holds a tile value too large: {error}') from error
