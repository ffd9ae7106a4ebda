"""
Tests for the TicTacToe game state engine.
Covers starting a game, placing marks, turn order, and rendering.
"""

import pytest

from logic.game_state import GameState, Move
from logic.mark import Mark
from logic.move_validator import MoveError
from logic.win_checker import GamePhase


def play(game, moves):
    """Make each (row, col) move, asserting it succeeds."""
    for row, col in moves:
        assert game.make_move(row, col), f"move ({row}, {col}) was refused"
    return game


# Top-row win for X
SCENARIO_A = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]

# Fills the board as X O X / X O X / O X O without anyone winning early
SCENARIO_B = [
    (0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
    (2, 0), (1, 2), (2, 2), (2, 1),
]


def test_new_game_is_empty():
    game = GameState.start(Mark.X)
    assert game.is_full() is False
    assert game.winner() is None
    assert game.phase is GamePhase.IN_PROGRESS
    assert game.current_player is Mark.X
    assert len(game.get_empty_cells()) == 9
    assert game.moves == []


@pytest.mark.parametrize("starting", [Mark.O, "O", "o", " O "])
def test_start_with_second_player(starting):
    assert GameState.start(starting).current_player is Mark.O


@pytest.mark.parametrize("starting", ["Z", "", "XO", None, 7])
def test_invalid_designator_falls_back_to_x(starting):
    game = GameState.start(starting)
    assert game.current_player is Mark.X
    assert game.winner() is None


def test_default_constructor_starts_with_x():
    assert GameState().current_player is Mark.X


def test_marks_alternate_and_match_active_player():
    game = GameState.start("O")
    for row, col in SCENARIO_B:
        active = game.current_player
        assert game.make_move(row, col)
        assert game.board[row][col] is active
        assert game.current_player is active.opposite()


def test_moves_are_recorded_in_order():
    game = play(GameState.start(), [(1, 1), (0, 0)])
    assert game.moves == [
        Move(mark=Mark.X, row=1, col=1, move_number=0),
        Move(mark=Mark.O, row=0, col=0, move_number=1),
    ]


def test_scenario_a_top_row_win():
    game = play(GameState.start(Mark.X), SCENARIO_A)
    assert game.winner() is Mark.X
    assert game.is_full() is False
    assert game.phase is GamePhase.WON
    assert game.is_game_over


def test_scenario_b_draw():
    game = play(GameState.start(Mark.X), SCENARIO_B)
    assert game.is_full() is True
    assert game.winner() is None
    assert game.phase is GamePhase.DRAWN
    assert game.render() == "X | O | X\nX | O | X\nO | X | O"


def test_scenario_c_occupied_cell_is_refused():
    game = play(GameState.start(Mark.X), [(1, 1)])
    before = [row[:] for row in game.board]

    assert game.make_move(1, 1) is False
    assert game.make_move(1, 1) is False
    assert game.board == before
    assert game.current_player is Mark.O
    assert len(game.moves) == 1


def test_occupied_cell_reports_reason():
    game = play(GameState.start(), [(2, 2)])
    result = game.try_move(2, 2)
    assert not result
    assert result.error is MoveError.OCCUPIED
    assert "(2, 2)" in result.error_message


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (-3, -3), (99, 1)])
def test_out_of_range_is_refused_without_change(row, col):
    game = GameState.start()
    result = game.try_move(row, col)

    assert result.error is MoveError.OUT_OF_RANGE
    assert game.make_move(row, col) is False
    assert game.get_empty_cells() == GameState().get_empty_cells()
    assert game.current_player is Mark.X


def test_no_moves_after_win():
    game = play(GameState.start(), SCENARIO_A)
    result = game.try_move(2, 2)

    assert result.error is MoveError.GAME_OVER
    assert game.board[2][2] is None
    assert game.current_player is Mark.O


def test_render_empty_board():
    assert GameState().render() == "  |   |  \n  |   |  \n  |   |  "


def test_render_is_pure():
    game = play(GameState.start(), [(0, 0), (1, 2)])
    copy = game.copy()
    text = game.render()

    assert text == "X |   |  \n  |   | O\n  |   |  "
    assert str(game) == text
    assert game == copy


def test_copy_is_independent():
    game = play(GameState.start(), [(0, 0)])
    clone = game.copy()
    clone.make_move(1, 1)

    assert game.board[1][1] is None
    assert game.current_player is Mark.O
    assert len(game.moves) == 1


def test_empty_cells_shrink_as_board_fills():
    game = GameState.start()
    for count, (row, col) in enumerate(SCENARIO_B, start=1):
        game.make_move(row, col)
        assert (row, col) not in game.get_empty_cells()
        assert len(game.get_empty_cells()) == 9 - count
