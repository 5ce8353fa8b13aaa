from __future__ import annotations

from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Move


class InvalidMove(Exception):
    pass


class Game:
    """
    Game keeps the side to move and every board that was played so far.
    The first board in `boards` is the starting board.
    """

    def __init__(self, board: Optional[Board] = None, turn: Optional[int] = BLACK) -> None:
        assert turn in [BLACK, WHITE, None]

        if board is None:
            board = Board.start()

        self.boards: list[Board] = [board]
        self.moves: list[Move] = []
        self.passes: list[int] = []
        self.turn = turn

        # A game handed over with a side to move that cannot move is already over
        # or needs a pass, resolve it the same way as after a move.
        if turn is not None and not board.has_moves(turn):
            self.turn = board.next_turn(turn)

    @classmethod
    def from_moves(cls, moves: list[Move]) -> Game:
        game = Game()
        for row, col in moves:
            game.play(row, col)
        return game

    @classmethod
    def from_string(cls, string: str) -> Game:
        moves: list[Move] = []

        for word in string.split():
            # Skip move numbers such as "1."
            if word[0].isdigit():
                continue

            moves.append(Board.field_to_move(word))

        return cls.from_moves(moves)

    @property
    def board(self) -> Board:
        return self.boards[-1]

    def is_over(self) -> bool:
        return self.turn is None

    def play(self, row: int, col: int) -> Board:
        if self.turn is None:
            raise InvalidMove("Game is over")

        child = self.board.do_move(row, col, self.turn)

        if child is None:
            raise InvalidMove(f"Move ({row}, {col}) is not valid")

        mover = self.turn
        self.boards.append(child)
        self.moves.append((row, col))
        self.turn = child.next_turn(mover)

        if self.turn == mover:
            # Offsets into `moves` after which the opponent had to pass.
            self.passes.append(len(self.moves) - 1)

        return child

    def get_winner(self) -> Optional[int]:
        return self.board.get_winner()

    def get_score(self) -> int:
        black, white = self.board.count_pieces()
        return black - white

    def zip_board_moves(self) -> zip[tuple[Board, Move]]:
        return zip(self.boards[:-1], self.moves, strict=True)

    def to_string(self) -> str:
        return Board.moves_to_fields(self.moves)
