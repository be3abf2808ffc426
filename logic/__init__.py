"""
Logic module for terminal TicTacToe.
Handles the board, win detection, turns, and key-to-cell mapping.
"""

from .board import Board, CellState, CellOccupiedError, Player
from .game_state import GameState, GameStatus, GameOverError, Move, MoveOutcome, MoveResult
from .win_checker import WinChecker, detect_winner
from .input_resolver import resolve_key, key_for_cell
