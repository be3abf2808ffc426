"""
Tests for the TicTacToe logic modules.
Covers the board, win checker, turn engine, and key mapping.

Usage:
    pytest test_logic.py
    python test_logic.py    # Quick run with a pass/fail summary
"""

import copy
import sys

import pytest

from logic.board import Board, CellState, CellOccupiedError, Player
from logic.game_state import GameState, GameStatus, GameOverError, MoveOutcome
from logic.input_resolver import KEY_LAYOUT, resolve_key, key_for_cell
from logic.win_checker import WinChecker, detect_winner


def play(game: GameState, keys: str):
    """Apply a sequence of keys to the game, returning the last result."""
    result = None
    for key in keys:
        result = game.apply_move(*resolve_key(key))
    return result


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    for row in range(3):
        for col in range(3):
            assert board.cell_at(row, col) == CellState.EMPTY
    assert len(board.get_empty_cells()) == 9
    assert not board.is_full()


def test_mark_empty_cell():
    board = Board()
    board.mark(1, 2, Player.CROSSES)
    board.mark(0, 0, Player.NOUGHTS)

    assert board.cell_at(1, 2) == CellState.CROSS
    assert board.cell_at(0, 0) == CellState.NOUGHT
    assert len(board.get_empty_cells()) == 7


@pytest.mark.parametrize("first", list(Player))
@pytest.mark.parametrize("second", list(Player))
def test_mark_occupied_cell_fails_for_either_player(first, second):
    board = Board()
    board.mark(2, 1, first)
    before = copy.deepcopy(board)

    with pytest.raises(CellOccupiedError) as exc_info:
        board.mark(2, 1, second)

    assert exc_info.value.occupant == first.mark
    assert (exc_info.value.row, exc_info.value.col) == (2, 1)
    assert board == before


def test_board_from_rows():
    board = Board.from_rows("XO.", " X ", "..O")
    assert board.cell_at(0, 0) == CellState.CROSS
    assert board.cell_at(0, 1) == CellState.NOUGHT
    assert board.cell_at(1, 0) == CellState.EMPTY
    assert board.cell_at(1, 1) == CellState.CROSS
    assert board.cell_at(2, 2) == CellState.NOUGHT
    assert str(board) == "XO.\n.X.\n..O"


def test_board_from_rows_rejects_bad_shape():
    with pytest.raises(ValueError):
        Board.from_rows("XO", "...", "...")


def test_player_display():
    assert Player.CROSSES.letter == "X"
    assert Player.CROSSES.number == 1
    assert Player.CROSSES.display_name == "Crosses"
    assert Player.NOUGHTS.letter == "O"
    assert Player.NOUGHTS.number == 2
    assert Player.NOUGHTS.display_name == "Noughts"
    assert Player.CROSSES.opposite() == Player.NOUGHTS
    assert Player.NOUGHTS.opposite() == Player.CROSSES


def test_cell_state_to_player():
    assert CellState.EMPTY.to_player() is None
    assert CellState.CROSS.to_player() == Player.CROSSES
    assert CellState.NOUGHT.to_player() == Player.NOUGHTS


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(line, player):
    board = Board()
    for row, col in line:
        board.mark(row, col, player)

    assert detect_winner(board) == player


def test_no_winner_on_empty_board():
    assert detect_winner(Board()) is None


def test_mixed_line_does_not_win():
    board = Board.from_rows(
        "XXO",
        ".O.",
        "X..",
    )
    assert detect_winner(board) is None


def test_winner_does_not_modify_board():
    board = Board.from_rows(
        "OOO",
        "XX.",
        "X..",
    )
    before = copy.deepcopy(board)

    assert detect_winner(board) == Player.NOUGHTS
    assert board == before


def test_two_lines_completed_at_once():
    # Last cross at (0, 0) completes the top row and the main diagonal
    board = Board.from_rows(
        "XXX",
        "OXO",
        "OOX",
    )
    complete = [
        line for line in WinChecker.WINNING_LINES
        if all(board.cell_at(row, col) == CellState.CROSS for row, col in line)
    ]
    assert complete == [
        [(0, 0), (0, 1), (0, 2)],
        [(0, 0), (1, 1), (2, 2)],
    ]
    assert detect_winner(board) == Player.CROSSES

    # Each line on its own is enough for the same winner
    for line in complete:
        single = Board()
        for row, col in line:
            single.mark(row, col, Player.CROSSES)
        assert detect_winner(single) == Player.CROSSES


def test_check_draw():
    checker = WinChecker()
    full_no_winner = Board.from_rows(
        "XOX",
        "XOO",
        "OXX",
    )
    full_with_winner = Board.from_rows(
        "XXX",
        "OOX",
        "XOO",
    )

    assert checker.check_draw(full_no_winner)
    assert not checker.check_draw(full_with_winner)
    assert not checker.check_draw(Board())


# ==================== GAME STATE ====================

def test_initial_state():
    game = GameState()
    assert game.status == GameStatus.AWAITING_MOVE
    assert game.current_player == Player.CROSSES
    assert game.winner is None
    assert not game.is_draw
    assert len(game.board.get_empty_cells()) == 9


def test_turns_alternate():
    game = GameState()

    result = game.apply_move(0, 0)
    assert result.outcome == MoveOutcome.ACCEPTED
    assert result.player == Player.CROSSES
    assert game.current_player == Player.NOUGHTS

    result = game.apply_move(1, 1)
    assert result.outcome == MoveOutcome.ACCEPTED
    assert result.player == Player.NOUGHTS
    assert game.current_player == Player.CROSSES

    assert [move.player for move in game.moves] == [Player.CROSSES, Player.NOUGHTS]
    assert [move.move_number for move in game.moves] == [0, 1]


def test_top_row_win():
    game = GameState()
    result = play(game, "15263")

    assert result.outcome == MoveOutcome.WON
    assert result.winner == Player.CROSSES
    assert game.status == GameStatus.GAME_OVER
    assert game.winner == Player.CROSSES
    assert not game.is_draw
    # Winning move does not pass the turn
    assert game.current_player == Player.CROSSES


def test_occupied_cell_is_rejected_without_using_the_turn():
    game = GameState()
    play(game, "1")
    assert game.current_player == Player.NOUGHTS
    before = copy.deepcopy(game)

    result = game.apply_move(0, 0)

    assert result.outcome == MoveOutcome.REJECTED
    assert result.is_rejected
    assert game == before
    assert game.current_player == Player.NOUGHTS
    assert game.winner is None

    result = game.apply_move(0, 1)
    assert result.outcome == MoveOutcome.ACCEPTED
    assert game.board.cell_at(0, 1) == CellState.NOUGHT
    assert game.current_player == Player.CROSSES


def test_full_board_without_line_is_draw():
    game = GameState()
    result = play(game, "123546879")

    assert result.outcome == MoveOutcome.DRAW
    assert result.winner is None
    assert game.status == GameStatus.GAME_OVER
    assert game.is_draw
    assert game.winner is None
    assert game.board.is_full()


def test_win_on_last_cell_is_not_a_draw():
    game = GameState()
    # X: 1 3 6 8 9 / O: 2 4 5 7; the ninth move completes the right column
    result = play(game, "123465879")

    assert result.outcome == MoveOutcome.WON
    assert game.winner == Player.CROSSES
    assert not game.is_draw


def test_move_after_game_over_raises():
    game = GameState()
    play(game, "15263")

    with pytest.raises(GameOverError):
        game.apply_move(2, 2)


# ==================== INPUT RESOLVER ====================

def test_key_layout_is_a_bijection():
    cells = [resolve_key(str(n)) for n in range(1, 10)]
    assert cells == [(row, col) for row in range(3) for col in range(3)]
    assert len(set(cells)) == 9


def test_key_for_cell_inverts_resolve_key():
    for key, (row, col) in KEY_LAYOUT.items():
        assert key_for_cell(row, col) == key


@pytest.mark.parametrize("key", ["0", "a", "X", " ", "\n", "\x1b", "10", "", "-1", "١", None])
def test_other_keys_resolve_to_nothing(key):
    assert resolve_key(key) is None


def run_all_tests():
    """Run the tests that need no fixtures."""
    print("=" * 60)
    print("   TicTacToe - Logic Tests")
    print("=" * 60)

    tests = [
        obj for name, obj in sorted(globals().items())
        if name.startswith("test_") and callable(obj) and obj.__code__.co_argcount == 0
    ]

    failed = 0
    for test in tests:
        try:
            test()
            print(f"  ✓ {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  ✗ {test.__name__}: {e!r}")

    print("=" * 60)
    print(f"  {len(tests) - failed}/{len(tests)} passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
