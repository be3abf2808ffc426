"""
Board model for terminal TicTacToe.
Holds the 3x3 grid of cells and the two players.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# The board is always 3x3
BOARD_SIZE = 3


class Player(Enum):
    """The two players in the game."""
    CROSSES = "X"
    NOUGHTS = "O"

    @property
    def letter(self) -> str:
        """The mark letter shown on the board ('X' or 'O')."""
        return self.value

    @property
    def number(self) -> int:
        """The player number shown in prompts (1 or 2)."""
        return 1 if self == Player.CROSSES else 2

    @property
    def display_name(self) -> str:
        """Name used when announcing the result."""
        return "Crosses" if self == Player.CROSSES else "Noughts"

    @property
    def mark(self) -> "CellState":
        """The cell state this player leaves on the board."""
        return CellState.CROSS if self == Player.CROSSES else CellState.NOUGHT

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.NOUGHTS if self == Player.CROSSES else Player.CROSSES


class CellState(Enum):
    """Occupancy of a single cell."""
    EMPTY = "."
    CROSS = "X"
    NOUGHT = "O"

    def to_player(self) -> Optional[Player]:
        """Get the player owning this cell, or None if empty."""
        if self == CellState.EMPTY:
            return None
        return Player(self.value)


class CellOccupiedError(Exception):
    """Raised when marking a cell that has already been played."""

    def __init__(self, row: int, col: int, occupant: CellState):
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant.value}")
        self.row = row
        self.col = col
        self.occupant = occupant


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored row-major; row and column indices run 0-2:

        [1] [2] [3]   <- row 0
        [4] [5] [6]   <- row 1
        [7] [8] [9]   <- row 2

    A marked cell never goes back to EMPTY during a game.
    """

    cells: List[List[CellState]] = field(
        default_factory=lambda: [[CellState.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    )

    @classmethod
    def from_rows(cls, *rows: str) -> "Board":
        """
        Build a board from three row strings.

        Args:
            rows: Three strings of three characters each, using 'X', 'O'
                and '.' (or space) for an empty cell. E.g. "XO.".

        Returns:
            The new Board.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells, got {rows!r}")

        cells = []
        for row in rows:
            cells.append([CellState(ch.upper()) if ch != " " else CellState.EMPTY for ch in row])
        return cls(cells=cells)

    def cell_at(self, row: int, col: int) -> CellState:
        """Get the state of the cell at (row, col)."""
        return self.cells[row][col]

    def mark(self, row: int, col: int, player: Player):
        """
        Place a player's mark in an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: The player marking the cell.

        Raises:
            CellOccupiedError: If the cell is already marked. The board
                is left unchanged.
        """
        current = self.cells[row][col]
        if current != CellState.EMPTY:
            raise CellOccupiedError(row, col, current)

        self.cells[row][col] = player.mark

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.cells[row][col] == CellState.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        """True when all 9 cells are marked."""
        return not self.get_empty_cells()

    def __str__(self) -> str:
        return "\n".join("".join(cell.value for cell in row) for row in self.cells)
