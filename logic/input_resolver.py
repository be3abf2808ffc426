"""
Input resolver for terminal TicTacToe.
Maps a single keypress to a board cell.
"""

from typing import Optional, Tuple


# Keys laid out like the rendered board legend
KEY_LAYOUT = {
    "1": (0, 0), "2": (0, 1), "3": (0, 2),
    "4": (1, 0), "5": (1, 1), "6": (1, 2),
    "7": (2, 0), "8": (2, 1), "9": (2, 2),
}

_CELL_KEYS = {cell: key for key, cell in KEY_LAYOUT.items()}


def resolve_key(key: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Resolve a keypress to board coordinates.

    Only the single characters '1'-'9' map to a cell. Anything else
    ('0', letters, control keys, multi-character sequences) gives None
    and the caller simply asks again. Occupancy is not checked here.

    Args:
        key: The key that was pressed.

    Returns:
        (row, col) for the key, or None if the key is not a cell key.
    """
    if not isinstance(key, str):
        return None
    return KEY_LAYOUT.get(key)


def key_for_cell(row: int, col: int) -> str:
    """Get the key ('1'-'9') that selects the cell at (row, col)."""
    return _CELL_KEYS[(row, col)]
