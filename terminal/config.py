"""
Terminal configuration for TicTacToe.
All the settings for screen handling, colours, and message texts.
"""

from colorama import Fore


class TerminalConfig:
    """
    Configuration class for terminal settings.
    Change these values to adjust how the game looks!
    """

    # ==================== SCREEN SETTINGS ====================
    # Clear the screen before drawing the board each round
    CLEAR_SCREEN = True

    # Printed instead of clearing when the screen can't be cleared
    SEPARATOR = "\n==============================\n"

    # ==================== KEYBOARD SETTINGS ====================
    # Seconds to wait for the rest of an escape sequence (arrows, F-keys)
    ESCAPE_TIMEOUT = 0.05

    # ==================== COLOUR SETTINGS ====================
    USE_COLOR = True

    # Prompt colour per player letter
    PLAYER_COLORS = {
        "X": Fore.RED,
        "O": Fore.CYAN,
    }
    RESULT_COLOR = Fore.YELLOW
    ERROR_COLOR = Fore.RED

    # ==================== MESSAGES ====================
    PROMPT_TEMPLATE = "Please type a number to place an {letter}"
    TURN_TEMPLATE = "Player {number} ({letter}): "
    WIN_TEMPLATE = "{name} wins!"
    DRAW_MESSAGE = "It's a draw!"
    INTERRUPTED_MESSAGE = "Game interrupted by user."
