"""
Win checker for terminal TicTacToe.
Checks if a player has three in a row or if the game is a draw.
"""

from typing import Optional, List, Tuple
from .board import Board, CellState, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a line
    (vertically, horizontally, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        A legally played move can complete more than one line at once
        (e.g. a row and a diagonal), but all of them carry the mover's
        mark, so returning the first line found is unambiguous.

        Args:
            board: The board to check. Not modified.

        Returns:
            The winning Player, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Args:
            board: The game board.
            line: List of (row, col) positions to check.

        Returns:
            The winning Player if all 3 cells hold the same mark, None otherwise.
        """
        cells = [board.cell_at(row, col) for row, col in line]

        if cells[0] == CellState.EMPTY:
            return None  # Empty cell, no winner on this line

        if cells[0] == cells[1] == cells[2]:
            return cells[0].to_player()

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False

        return board.is_full()


_default_checker = WinChecker()


def detect_winner(board: Board) -> Optional[Player]:
    """Return the player with three in a row on `board`, if any."""
    return _default_checker.check_winner(board)
