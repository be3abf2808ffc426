"""
Board renderer for terminal TicTacToe.
Turns a board into the text grid shown to the players.
"""

from typing import List, Union
from logic.board import Board, CellState, BOARD_SIZE
from logic.input_resolver import key_for_cell


def render_cell(state: CellState, position: Union[int, str]) -> str:
    """
    Render a single cell.

    Args:
        state: The cell's state.
        position: The cell's 1-based position (1-9), shown when empty
            so players know which key to press.

    Returns:
        "[X]", "[O]", or "[n]" for an empty cell.
    """
    if state == CellState.EMPTY:
        return f"[{position}]"
    return f"[{state.value}]"


def render_board(board: Board) -> List[str]:
    """
    Render the board as three lines of three cells.

    Example for an empty board:

        [1] [2] [3]
        [4] [5] [6]
        [7] [8] [9]
    """
    lines = []
    for row in range(BOARD_SIZE):
        tokens = []
        for col in range(BOARD_SIZE):
            tokens.append(render_cell(board.cell_at(row, col), key_for_cell(row, col)))
        lines.append(" ".join(tokens))
    return lines
