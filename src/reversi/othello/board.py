from __future__ import annotations

from typing import Iterable, Optional

BLACK = -1
WHITE = 1
EMPTY = 0

# Outcome of a finished game in which both sides hold the same number of discs.
DRAW = 2

ROWS = 8
COLS = 8

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

COLOR_NAMES = {BLACK: "black", WHITE: "white"}
OUTCOME_NAMES = {BLACK: "black", WHITE: "white", DRAW: "draw"}

Move = tuple[int, int]


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_to_api(color: int) -> str:
    return COLOR_NAMES[color]


def color_from_api(name: str) -> int:
    for color, color_name in COLOR_NAMES.items():
        if name == color_name:
            return color
    raise ValueError(f'Invalid color "{name}"')


def outcome_to_api(outcome: Optional[int]) -> Optional[str]:
    if outcome is None:
        return None
    return OUTCOME_NAMES[outcome]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


class Board:
    """
    Board stores an immutable 8x8 othello grid, without the color of the player to move.
    Every move returns a new Board, so callers can keep older boards around for history.
    """

    def __init__(self, squares: Iterable[int]) -> None:
        squares = tuple(squares)

        if len(squares) != ROWS * COLS:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")

        for square in squares:
            if square not in [BLACK, WHITE, EMPTY]:
                raise ValueError(f"Invalid square value {square!r}")

        self.__squares = squares

    @property
    def squares(self) -> tuple[int, ...]:
        return self.__squares

    @classmethod
    def start(cls) -> Board:
        squares = [EMPTY] * (ROWS * COLS)
        squares[3 * COLS + 3] = WHITE
        squares[3 * COLS + 4] = BLACK
        squares[4 * COLS + 3] = BLACK
        squares[4 * COLS + 4] = WHITE
        return Board(squares)

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * (ROWS * COLS))

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        return Board(squares)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError("Board must have 8 rows of 8 squares")

        return Board(square for row in rows for square in row)

    @classmethod
    def from_api(cls, rows: list[list[Optional[str]]]) -> Board:
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError("Board must have 8 rows of 8 squares")

        squares: list[int] = []
        for row in rows:
            for cell in row:
                if cell is None:
                    squares.append(EMPTY)
                else:
                    squares.append(color_from_api(cell))

        return Board(squares)

    def to_api(self) -> list[list[Optional[str]]]:
        rows: list[list[Optional[str]]] = []
        for row in range(ROWS):
            cells: list[Optional[str]] = []
            for col in range(COLS):
                square = self.get_square(row, col)
                cells.append(None if square == EMPTY else color_to_api(square))
            rows.append(cells)
        return rows

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def get_square(self, row: int, col: int) -> int:
        if not in_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")
        return self.__squares[row * COLS + col]

    def flips_in_direction(
        self, row: int, col: int, color: int, dr: int, dc: int
    ) -> list[Move]:
        """
        Returns the discs that a `color` disc placed on (row, col) would flip in one direction.
        The run of opponent discs only counts if a `color` disc closes it.
        """
        opp = opponent(color)
        flips: list[Move] = []

        r, c = row + dr, col + dc
        while in_bounds(r, c) and self.__squares[r * COLS + c] == opp:
            flips.append((r, c))
            r, c = r + dr, c + dc

        if not flips or not in_bounds(r, c) or self.__squares[r * COLS + c] != color:
            return []

        return flips

    def get_flips(self, row: int, col: int, color: int) -> list[Move]:
        flips: list[Move] = []
        for dr, dc in DIRECTIONS:
            flips += self.flips_in_direction(row, col, color, dr, dc)
        return flips

    def is_valid_move(self, row: int, col: int, color: int) -> bool:
        if not in_bounds(row, col):
            return False

        if self.__squares[row * COLS + col] != EMPTY:
            return False

        return any(
            self.flips_in_direction(row, col, color, dr, dc)
            for dr, dc in DIRECTIONS
        )

    def get_moves(self, color: int) -> list[Move]:
        return [
            (row, col)
            for row in range(ROWS)
            for col in range(COLS)
            if self.is_valid_move(row, col, color)
        ]

    def has_moves(self, color: int) -> bool:
        return len(self.get_moves(color)) > 0

    def do_move(self, row: int, col: int, color: int) -> Optional[Board]:
        """
        Returns the board after `color` plays (row, col), or None if the move is rejected.
        This board is left untouched either way.
        """
        if not self.is_valid_move(row, col, color):
            return None

        squares = list(self.__squares)
        squares[row * COLS + col] = color

        for flip_row, flip_col in self.get_flips(row, col, color):
            squares[flip_row * COLS + flip_col] = color

        return Board(squares)

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.__squares.count(color)

    def count_pieces(self) -> tuple[int, int]:
        return self.count(BLACK), self.count(WHITE)

    def count_discs(self) -> int:
        return ROWS * COLS - self.count_empties()

    def count_empties(self) -> int:
        return self.__squares.count(EMPTY)

    def is_game_end(self) -> bool:
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def get_winner(self) -> Optional[int]:
        if not self.is_game_end():
            return None

        black, white = self.count_pieces()

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return DRAW

    def next_turn(self, mover: int) -> Optional[int]:
        """
        Returns who moves after `mover` just moved on this board, or None if the game is over.
        The opponent passes when only `mover` can still move.
        """
        opp = opponent(mover)

        if self.has_moves(opp):
            return opp

        if self.has_moves(mover):
            return mover

        return None

    @classmethod
    def from_string(cls, string: str) -> Board:
        """
        Parses 64 squares written as X (black), O (white) or - (empty).
        Whitespace is ignored, so boards can be written as 8 lines of 8 squares.
        """
        chars = {"X": BLACK, "O": WHITE, "-": EMPTY}
        string = "".join(string.split()).upper()

        if len(string) != ROWS * COLS:
            raise ValueError(f"Board needs 64 squares, got {len(string)}")

        try:
            return Board(chars[char] for char in string)
        except KeyError as e:
            raise ValueError(f"Invalid square {e}") from e

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "-"}
        return "".join(chars[square] for square in self.__squares)

    def show(self, turn: Optional[int] = None) -> None:
        moves = set(self.get_moves(turn)) if turn is not None else set()

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(ROWS):
            print("{} ".format(row + 1), end="")

            for col in range(COLS):
                square = self.get_square(row, col)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif (row, col) in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        if index not in range(ROWS * COLS):
            raise ValueError
        return "abcdefgh"[index % COLS] + "12345678"[index // COLS]

    @classmethod
    def move_to_field(cls, move: Move) -> str:
        row, col = move
        if not in_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")
        return cls.index_to_field(row * COLS + col)

    @classmethod
    def moves_to_fields(cls, moves: Iterable[Move]) -> str:
        return " ".join(cls.move_to_field(move) for move in moves)

    @classmethod
    def field_to_move(cls, field: str) -> Move:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return row, col

    def __hash__(self) -> int:
        return hash(self.__squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.__squares == other.__squares


def create_initial_board() -> Board:
    return Board.start()


def get_valid_moves(board: Board, color: int) -> list[Move]:
    return board.get_moves(color)


def make_move(board: Board, row: int, col: int, color: int) -> Optional[Board]:
    return board.do_move(row, col, color)


def count_pieces(board: Board) -> tuple[int, int]:
    return board.count_pieces()


def get_winner(board: Board) -> Optional[int]:
    return board.get_winner()


def next_turn(board: Board, mover: int) -> Optional[int]:
    return board.next_turn(mover)
