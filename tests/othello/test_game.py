import pytest

from reversi.othello.board import BLACK, DRAW, WHITE, Board
from reversi.othello.game import Game, InvalidMove

BOARD_FORCED_PASS = Board.from_string(
    """
    XO------
    --------
    --------
    --------
    --------
    --------
    --------
    XO------
    """
)

OPENING = "d3 c3 c4"


def test_new_game() -> None:
    game = Game()
    assert game.board == Board.start()
    assert game.turn == BLACK
    assert game.boards == [Board.start()]
    assert game.moves == []
    assert not game.is_over()


def test_play() -> None:
    game = Game()
    child = game.play(2, 3)

    assert game.board is child
    assert game.turn == WHITE
    assert game.moves == [(2, 3)]
    assert len(game.boards) == 2
    assert game.boards[0] == Board.start()
    assert game.get_score() == 3


def test_play_invalid_leaves_game_unchanged() -> None:
    game = Game()

    with pytest.raises(InvalidMove):
        game.play(0, 0)

    assert game.turn == BLACK
    assert game.moves == []
    assert game.boards == [Board.start()]


def test_play_out_of_bounds() -> None:
    with pytest.raises(InvalidMove):
        Game().play(8, 8)


def test_forced_pass() -> None:
    game = Game(BOARD_FORCED_PASS, BLACK)

    game.play(0, 2)
    assert game.turn == BLACK
    assert game.passes == [0]

    game.play(7, 2)
    assert game.is_over()
    assert game.turn is None
    assert game.get_winner() == BLACK

    with pytest.raises(InvalidMove):
        game.play(1, 1)


def test_turn_without_moves_is_resolved() -> None:
    # White was handed the turn but cannot move, so black moves instead.
    game = Game(BOARD_FORCED_PASS, WHITE)
    assert game.turn == BLACK


def test_finished_board() -> None:
    game = Game(Board([BLACK] * 32 + [WHITE] * 32), BLACK)
    assert game.is_over()
    assert game.get_winner() == DRAW
    assert game.get_score() == 0


def test_from_moves() -> None:
    game = Game.from_moves([(2, 3), (2, 2)])
    assert game.turn == BLACK
    assert game.moves == [(2, 3), (2, 2)]
    assert game.board.count_pieces() == (3, 3)


def test_from_moves_invalid() -> None:
    with pytest.raises(InvalidMove):
        Game.from_moves([(2, 3), (2, 3)])


def test_from_string() -> None:
    game = Game.from_string(OPENING)

    assert game.moves == [(2, 3), (2, 2), (3, 2)]
    assert game.turn == WHITE
    assert game.board.count_pieces() == (5, 2)
    assert game.get_score() == 3
    assert game.get_winner() is None


def test_from_string_skips_move_numbers() -> None:
    game = Game.from_string("1. d3 c3\n2. c4")
    assert game.moves == [(2, 3), (2, 2), (3, 2)]


def test_from_string_invalid_field() -> None:
    with pytest.raises(ValueError):
        Game.from_string("d3 z9")


def test_to_string() -> None:
    assert Game.from_string(OPENING).to_string() == OPENING


def test_zip_board_moves() -> None:
    game = Game.from_string("d3 c3")
    pairs = list(game.zip_board_moves())

    assert len(pairs) == 2
    board, move = pairs[0]
    assert board == Board.start()
    assert move == (2, 3)


def test_history_boards_unchanged() -> None:
    game = Game()
    start = game.board
    before = start.to_string()

    game.play(2, 3)
    game.play(2, 2)

    assert game.boards[0] is start
    assert start.to_string() == before
