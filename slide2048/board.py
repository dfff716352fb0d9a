from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from slide2048.config import SIZE, START_TILES, WIN_VALUE
from slide2048.line import trace_line
from slide2048.rng import DefaultRandomSource, RandomSource, new_tile_value

Coord = Tuple[int, int]


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


@dataclass(frozen=True)
class TileTransition:
    """One tile moving from source to destination during a move."""
    source: Coord
    destination: Coord
    value: int  # value at the destination after the move
    merged: bool


# Grid cell for line i, slot j. Slot 0 is the edge tiles slide towards.
_CELL: Dict[Direction, Callable[[int, int], Coord]] = {
    Direction.LEFT: lambda i, j: (i, j),
    Direction.RIGHT: lambda i, j: (i, SIZE - 1 - j),
    Direction.UP: lambda i, j: (j, i),
    Direction.DOWN: lambda i, j: (SIZE - 1 - j, i),
}


def _validate_grid(grid) -> np.ndarray:
    cells = np.array(grid, dtype=int)
    if cells.shape != (SIZE, SIZE):
        raise ValueError(f"Grid must be {SIZE}x{SIZE}, got shape {cells.shape}")
    for value in cells.flat:
        if value != 0 and (value < 2 or value & (value - 1)):
            raise ValueError(f"Tile values must be powers of two >= 2, got {value}")
    return cells


class Board:
    def __init__(self, rng: Optional[RandomSource] = None, grid=None):
        self.rng = rng if rng is not None else DefaultRandomSource()
        self.score = 0
        self.last_spawn: Optional[Tuple[int, int, int]] = None
        if grid is not None:
            self.board = _validate_grid(grid)
        else:
            self.board = np.zeros((SIZE, SIZE), dtype=int)
            # Initialize board with two random tiles
            for _ in range(START_TILES):
                self.spawn_tile()

    def empty_cells(self) -> List[Coord]:
        return [(int(r), int(c)) for r, c in zip(*np.where(self.board == 0))]

    def spawn_tile(self) -> Optional[Tuple[int, int, int]]:
        """
        Add a new tile (2 or 4) to a random empty cell.
        Returns (row, col, value) of the new tile, or None if the board is full.
        """
        empty_cells = self.empty_cells()
        if not empty_cells:
            return None

        row, col = empty_cells[self.rng.choice(len(empty_cells))]
        value = new_tile_value(self.rng)
        self.board[row, col] = value
        self.last_spawn = (row, col, value)
        return self.last_spawn

    def apply_move(self, direction: Union[Direction, str]) -> List[TileTransition]:
        """
        Slide all tiles towards one edge, merging equal neighbours.

        Returns the transitions of every tile that moved or merged. An empty
        list means the board did not change and no tile was spawned.
        """
        direction = Direction(direction)
        cell = _CELL[direction]
        original_board = self.board.copy()
        transitions: List[TileTransition] = []

        for i in range(SIZE):
            coords = [cell(i, j) for j in range(SIZE)]
            line = [int(self.board[r, c]) for r, c in coords]
            values, gained, sources = trace_line(line)
            self.score += gained

            for j, origin in enumerate(sources):
                merged = len(origin) > 1
                for k in origin:
                    if merged or k != j:
                        transitions.append(TileTransition(coords[k], coords[j], values[j], merged))

            for (r, c), value in zip(coords, values):
                self.board[r, c] = value

        if np.array_equal(original_board, self.board):
            return []

        spawned = self.spawn_tile()
        assert spawned is not None, "board changed but has no empty cell"
        return transitions

    def move(self, direction: Union[Direction, str]) -> bool:
        """Returns True if the move resulted in any change."""
        return bool(self.apply_move(direction))

    def has_lost(self) -> bool:
        """Check if no moves are possible."""
        if np.any(self.board == 0):
            return False

        # Check for possible merges
        for i in range(SIZE):
            for j in range(SIZE - 1):
                # Check horizontal merges
                if self.board[i][j] == self.board[i][j + 1]:
                    return False
                # Check vertical merges
                if self.board[j][i] == self.board[j + 1][i]:
                    return False
        return True

    def has_won(self) -> bool:
        """Check if a 2048 tile is present."""
        return bool(np.any(self.board == WIN_VALUE))

    def get_grid(self) -> np.ndarray:
        """Return a copy of the current grid."""
        return self.board.copy()

    def get_score(self) -> int:
        return self.score
