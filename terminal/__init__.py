"""
Terminal module for TicTacToe.
Handles console input/output and drawing the board.
"""

from .config import TerminalConfig
from .console import Console, ConsoleError
from .renderer import render_board, render_cell
