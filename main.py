"""
Main orchestration script for terminal TicTacToe.

This script ties together:
- Terminal (console input/output, board rendering)
- Logic (board, turns, win detection, key mapping)

Run this script to play TicTacToe with two players on one keyboard!
"""

import sys
from typing import Optional

# Logic imports
from logic.game_state import GameState, MoveResult
from logic.input_resolver import resolve_key

# Terminal imports
from terminal.config import TerminalConfig
from terminal.console import Console, ConsoleError
from terminal.renderer import render_board


class TicTacToeGame:
    """
    Main controller for a two-player game.

    Game flow:
    1. Clear the screen and draw the board
    2. Prompt the current player and wait for a key
    3. Ignore keys that aren't 1-9 or point at a taken cell
    4. Place the mark, then check for a win or a full board
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        console: Optional[Console] = None
    ):
        """
        Initialize the game.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            console: Console to play on. A real terminal console if not provided.
        """
        self.config = config or TerminalConfig()
        self.console = console or Console(self.config)
        self.game_state = GameState()

    def start(self) -> GameState:
        """
        Play one game to the end.

        Returns:
            The finished game state.
        """
        while not self.game_state.is_game_over:
            self._play_round()

        self._show_game_result()
        return self.game_state

    def _draw_board(self):
        """Clear the screen (or print a separator) and draw the board."""
        if not self.console.clear_screen():
            self.console.print_line(self.config.SEPARATOR)

        self.console.print_lines(render_board(self.game_state.board))

    def _player_color(self) -> Optional[str]:
        return self.config.PLAYER_COLORS.get(self.game_state.current_player.letter)

    def _play_round(self) -> MoveResult:
        """
        Play one round: draw, prompt, and read keys until a move sticks.

        Returns:
            The result of the accepted move.
        """
        self._draw_board()

        player = self.game_state.current_player
        color = self._player_color()
        turn_line = self.config.TURN_TEMPLATE.format(number=player.number, letter=player.letter)

        self.console.print_line(self.config.PROMPT_TEMPLATE.format(letter=player.letter), color)
        self.console.print_line(turn_line, color)

        while True:
            cell = resolve_key(self.console.read_key())

            if cell is not None:
                result = self.game_state.apply_move(*cell)
                if not result.is_rejected:
                    return result

            # Rejected key or taken cell: ask again without redrawing the board
            self.console.print_line(turn_line, color)

    def _show_game_result(self):
        """Draw the final board and announce the result."""
        self._draw_board()

        winner = self.game_state.winner
        if winner is not None:
            message = self.config.WIN_TEMPLATE.format(name=winner.display_name)
        else:
            message = self.config.DRAW_MESSAGE

        self.console.print_line(message, self.config.RESULT_COLOR)


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player terminal TicTacToe")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between rounds (print a separator instead)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain text without colours"
    )

    args = parser.parse_args(argv)

    config = TerminalConfig()
    if args.no_clear:
        config.CLEAR_SCREEN = False
    if args.no_color:
        config.USE_COLOR = False

    console = Console(config)
    game = TicTacToeGame(config=config, console=console)

    try:
        game.start()
    except KeyboardInterrupt:
        console.print_line()
        console.print_line(config.INTERRUPTED_MESSAGE)
    except ConsoleError as e:
        console.print_line(f"ERROR: {e}", config.ERROR_COLOR)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
