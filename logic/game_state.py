"""
Game state management for terminal TicTacToe.
Tracks the board, current player, and move history, and applies moves.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field
from .board import Board, CellOccupiedError, Player
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


class MoveOutcome(Enum):
    """What happened when a move was applied."""
    ACCEPTED = "accepted"    # Mark placed, turn passed to the other player
    REJECTED = "rejected"    # Cell occupied, nothing changed
    WON = "won"              # Mark placed and completed a line
    DRAW = "draw"            # Mark placed and filled the board


class GameOverError(Exception):
    """Raised when a move is applied to a finished game."""


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


@dataclass
class MoveResult:
    """Result of applying a move."""
    outcome: MoveOutcome
    player: Player
    row: int
    col: int
    winner: Optional[Player] = None

    @property
    def is_rejected(self) -> bool:
        return self.outcome == MoveOutcome.REJECTED

    @property
    def is_game_over(self) -> bool:
        return self.outcome in (MoveOutcome.WON, MoveOutcome.DRAW)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player (Crosses always moves first)
    - Move history
    - Game status (awaiting a move, or over with a winner / draw)
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Player = Player.CROSSES

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    status: GameStatus = GameStatus.AWAITING_MOVE
    winner: Optional[Player] = None
    is_draw: bool = False

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def apply_move(self, row: int, col: int) -> MoveResult:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            MoveResult describing what happened. A REJECTED result leaves
            the state untouched and the same player to move.

        Raises:
            GameOverError: If the game has already finished.
        """
        if self.is_game_over:
            raise GameOverError("Game is already over!")

        player = self.current_player

        try:
            self.board.mark(row, col, player)
        except CellOccupiedError:
            return MoveResult(MoveOutcome.REJECTED, player, row, col)

        self.moves.append(Move(
            player=player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        # Check for winner, then for a full board
        winner = self.win_checker.check_winner(self.board)
        if winner is not None:
            self.winner = winner
            self.status = GameStatus.GAME_OVER
            return MoveResult(MoveOutcome.WON, player, row, col, winner=winner)

        if self.win_checker.check_draw(self.board):
            self.is_draw = True
            self.status = GameStatus.GAME_OVER
            return MoveResult(MoveOutcome.DRAW, player, row, col)

        self.current_player = player.opposite()
        return MoveResult(MoveOutcome.ACCEPTED, player, row, col)
