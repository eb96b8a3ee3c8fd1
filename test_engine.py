"""Tests for the game engine: state, rules, navigation and sessions."""

import random
import threading

import numpy as np
import pytest

from engine import (
    Mark, GameState, Won, IN_PROGRESS, DRAW, WIN_LINES,
    new_game, apply_move, validate_move, evaluate, focus_step, format_board,
    empty_cells, Direction, GameSession,
    MoveError, MoveErrorKind, GameOverError, InvalidIndexError, CellOccupiedError,
)


def play(*indices, state=None):
    """Apply a sequence of moves starting from a new game."""
    state = state or new_game()
    for index in indices:
        state = apply_move(state, index)
    return state


def board_from(text):
    """Build a board from a 9-character string of X, O and '.'."""
    cells = {"X": Mark.X, "O": Mark.O, ".": None}
    return tuple(cells[c] for c in text.replace(" ", ""))


class TestNewGame:
    def test_fresh_state(self):
        state = new_game()
        assert state.board == (None,) * 9
        assert state.current_turn == Mark.X
        assert state.status == IN_PROGRESS
        assert not state.is_over
        assert state.winner is None

    def test_repeated_calls_are_identical(self):
        assert new_game() == new_game()
        assert new_game() == GameState()

    def test_mark_opposite(self):
        assert Mark.X.opposite() == Mark.O
        assert Mark.O.opposite() == Mark.X


class TestWinLines:
    def test_fixed_order(self):
        assert WIN_LINES == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        )

    def test_plain_ints(self):
        for line in WIN_LINES:
            assert all(type(index) is int for index in line)

    @pytest.mark.parametrize("line", WIN_LINES)
    def test_every_line_wins_through_legal_moves(self, line):
        others = [i for i in range(9) if i not in line][:2]
        moves = [line[0], others[0], line[1], others[1], line[2]]
        state = play(*moves)
        assert state.status == Won(Mark.X, line)
        assert state.winner == Mark.X

    def test_o_can_win(self):
        # X: 0, 1, 6  O: 3, 4, 5
        state = play(0, 3, 1, 4, 6, 5)
        assert state.status == Won(Mark.O, (3, 4, 5))


class TestEvaluate:
    def test_empty_board(self):
        assert evaluate(new_game().board) == IN_PROGRESS

    def test_draw(self):
        assert evaluate(board_from("XOX XOO OXX")) == DRAW

    def test_full_board_with_line_is_won(self):
        assert evaluate(board_from("XXX OOX OXO")) == Won(Mark.X, (0, 1, 2))

    def test_first_line_in_order_wins(self):
        # Row 0 and column 0 both complete; rows come first
        assert evaluate(board_from("XXX X.. X..")) == Won(Mark.X, (0, 1, 2))
        # Two different marks complete; first in enumeration order
        assert evaluate(board_from("OOO ... XXX")) == Won(Mark.O, (0, 1, 2))

    def test_diagonals(self):
        assert evaluate(board_from("O.. .O. ..O")) == Won(Mark.O, (0, 4, 8))
        assert evaluate(board_from("..X .X. X..")) == Won(Mark.X, (2, 4, 6))

    def test_wrong_size(self):
        with pytest.raises(ValueError):
            evaluate((None,) * 8)


class TestApplyMove:
    def test_places_and_flips_turn(self):
        state = apply_move(new_game(), 4)
        assert state.board[4] == Mark.X
        assert state.current_turn == Mark.O
        assert state.status == IN_PROGRESS

    def test_does_not_mutate_input(self):
        before = new_game()
        apply_move(before, 0)
        assert before == new_game()

    def test_occupied_cell(self):
        state = play(4)
        with pytest.raises(CellOccupiedError) as info:
            apply_move(state, 4)
        assert info.value.kind == MoveErrorKind.CELL_OCCUPIED
        assert state.board[4] == Mark.X
        assert state.current_turn == Mark.O

    @pytest.mark.parametrize("index", [-1, 9, 100, "3", 1.0, True, None])
    def test_invalid_index(self, index):
        state = new_game()
        with pytest.raises(InvalidIndexError) as info:
            apply_move(state, index)
        assert info.value.kind == MoveErrorKind.INVALID_INDEX
        assert isinstance(info.value, IndexError)
        assert state == new_game()

    def test_game_over_checked_first(self):
        state = play(0, 4, 1, 5, 2)
        assert state.is_over
        # Even an invalid or occupied cell reports game over first
        for index in (3, 0, 42):
            with pytest.raises(GameOverError) as info:
                apply_move(state, index)
            assert info.value.kind == MoveErrorKind.GAME_OVER

    def test_numpy_integer_index(self):
        state = apply_move(new_game(), np.int64(4))
        assert state.board[4] == Mark.X
        assert validate_move(state, np.int8(0)).is_valid
        assert focus_step(np.int64(4), Direction.UP) == 1
        with pytest.raises(InvalidIndexError):
            apply_move(state, np.int64(9))

    def test_invalid_before_occupied(self):
        with pytest.raises(InvalidIndexError):
            apply_move(play(0), 9)

    def test_errors_share_base_class(self):
        for error in (GameOverError, InvalidIndexError, CellOccupiedError):
            assert issubclass(error, MoveError)

    def test_validate_move(self):
        state = play(4)
        assert validate_move(state, 0).is_valid
        result = validate_move(state, 4)
        assert not result.is_valid
        assert isinstance(result.error, CellOccupiedError)
        assert "occupied" in result.error_message

    def test_turn_alternation(self):
        state = new_game()
        order = [4, 0, 8, 2, 1, 7, 6, 3, 5]
        for n, index in enumerate(order, start=1):
            state = apply_move(state, index)
            if state.is_over:
                break
            assert (state.current_turn == Mark.X) == (n % 2 == 0)

    def test_draw_sequence(self):
        state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
        assert state.status == DRAW
        assert state.board == board_from("XOX XOO OXX")
        with pytest.raises(GameOverError):
            apply_move(state, 0)

    def test_last_cell_win_is_not_a_draw(self):
        # The last move completes column 2 and the main diagonal at once;
        # the column comes first in line order
        state = play(0, 1, 2, 3, 5, 6, 4, 7, 8)
        assert state.status == Won(Mark.X, (2, 5, 8))

    def test_top_row_scenario(self):
        state = play(0, 4, 1, 5, 2)
        assert state.status == Won(Mark.X, (0, 1, 2))
        with pytest.raises(GameOverError):
            apply_move(state, 3)
        assert state.board[3] is None

    def test_evaluate_agrees_with_returned_status(self):
        rng = random.Random(1234)
        for _ in range(200):
            state = new_game()
            while not state.is_over:
                state = apply_move(state, rng.choice(empty_cells(state.board)))
                assert evaluate(state.board) == state.status


class TestFocusStep:
    EXPECTED = {
        Direction.UP:    [0, 1, 2, 0, 1, 2, 3, 4, 5],
        Direction.DOWN:  [3, 4, 5, 6, 7, 8, 6, 7, 8],
        Direction.LEFT:  [0, 0, 1, 3, 3, 4, 6, 6, 7],
        Direction.RIGHT: [1, 2, 2, 4, 5, 5, 7, 8, 8],
    }

    @pytest.mark.parametrize("direction", list(Direction))
    @pytest.mark.parametrize("index", range(9))
    def test_all_positions(self, index, direction):
        result = focus_step(index, direction)
        assert result == self.EXPECTED[direction][index]
        assert 0 <= result <= 8

    def test_string_direction(self):
        assert focus_step(4, "up") == 1

    def test_bad_direction(self):
        with pytest.raises(ValueError):
            focus_step(4, "sideways")

    def test_bad_index(self):
        with pytest.raises(InvalidIndexError):
            focus_step(9, Direction.UP)


class TestFormatBoard:
    def test_numbers_empty_cells(self):
        text = format_board(play(0, 4).board)
        assert text.splitlines()[0] == " X | 2 | 3"
        assert text.splitlines()[2] == " 4 | O | 6"


class TestGameSession:
    def test_play_and_restart(self):
        session = GameSession()
        session.play(0)
        session.play(4)
        assert session.move_count == 2
        assert session.state.current_turn == Mark.X

        state = session.restart()
        assert state == new_game()
        assert session.move_count == 0

    def test_failed_play_keeps_state(self):
        session = GameSession()
        before = session.play(4)
        with pytest.raises(CellOccupiedError):
            session.play(4)
        assert session.state is before

    def test_restart_after_game_over(self):
        session = GameSession()
        for index in (0, 4, 1, 5, 2):
            session.play(index)
        assert session.state.is_over
        session.restart()
        session.play(8)
        assert session.state.board[8] == Mark.X

    def test_one_winner_per_cell_across_threads(self):
        session = GameSession()
        results = []

        def worker():
            try:
                session.play(4)
                results.append("ok")
            except CellOccupiedError:
                results.append("taken")

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert results.count("taken") == 15
        assert session.move_count == 1
