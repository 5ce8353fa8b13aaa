from __future__ import annotations

import logging
import threading
from copy import copy
from typing import Optional
from uuid import UUID, uuid4

from reversi.othello.board import BLACK, WHITE, Board

logger = logging.getLogger(__name__)

STATUS_WAITING = "waiting"
STATUS_ACTIVE = "active"
STATUS_FINISHED = "finished"

CREATOR_SIDES = ["black", "white", "random"]


class GameNotFound(Exception):
    pass


class GameNotJoinable(Exception):
    pass


class StaleGame(Exception):
    """
    Raised when a game changed between reading it and writing a move back.
    """


class GameRecord:
    def __init__(
        self,
        *,
        id: UUID,
        status: str,
        board: Board,
        turn: int,
        winner: Optional[int],
        creator_side: str,
        black_player_id: Optional[UUID],
        white_player_id: Optional[UUID],
        move_count: int = 0,
    ) -> None:
        assert status in [STATUS_WAITING, STATUS_ACTIVE, STATUS_FINISHED]
        assert creator_side in CREATOR_SIDES

        self.id = id
        self.status = status
        self.board = board
        self.turn = turn
        self.winner = winner
        self.creator_side = creator_side
        self.black_player_id = black_player_id
        self.white_player_id = white_player_id

        # Moves stored so far. The turn alone does not change when the opponent has to pass.
        self.move_count = move_count

    def get_player_id(self, color: int) -> Optional[UUID]:
        if color == BLACK:
            return self.black_player_id
        return self.white_player_id

    def __repr__(self) -> str:
        return f"GameRecord({self.id}, {self.status})"


class GameStore:
    """
    In-memory game records.

    All reads return copies, callers only change stored games through `join()` and `update()`.
    """

    def __init__(self) -> None:
        self._games: dict[UUID, GameRecord] = {}
        self._lock = threading.Lock()

    def create(self, player_id: UUID, creator_side: str) -> GameRecord:
        if creator_side not in CREATOR_SIDES:
            raise ValueError(f'Invalid creator side "{creator_side}"')

        black_player_id: Optional[UUID] = None
        white_player_id: Optional[UUID] = None

        if creator_side == "white":
            white_player_id = player_id
        else:
            black_player_id = player_id

        game = GameRecord(
            id=uuid4(),
            status=STATUS_WAITING,
            board=Board.start(),
            turn=BLACK,
            winner=None,
            creator_side=creator_side,
            black_player_id=black_player_id,
            white_player_id=white_player_id,
        )

        with self._lock:
            self._games[game.id] = game

        logger.info(f"Created game {game.id}")
        return copy(game)

    def get(self, game_id: UUID) -> GameRecord:
        with self._lock:
            try:
                game = self._games[game_id]
            except KeyError as e:
                raise GameNotFound(f"Game {game_id} not found") from e
            return copy(game)

    def join(self, game_id: UUID, player_id: UUID) -> tuple[GameRecord, int]:
        """
        Seats `player_id` in the free seat of a waiting game and starts it.
        Returns the updated game and the color of the joined player.
        """
        with self._lock:
            try:
                game = self._games[game_id]
            except KeyError as e:
                raise GameNotFound(f"Game {game_id} not found") from e

            if game.status != STATUS_WAITING:
                raise GameNotJoinable("Game already started")

            if game.black_player_id is not None and game.white_player_id is not None:
                raise GameNotJoinable("Game already has two players")

            if game.black_player_id is None:
                game.black_player_id = player_id
                color = BLACK
            else:
                game.white_player_id = player_id
                color = WHITE

            game.status = STATUS_ACTIVE
            return copy(game), color

    def update(
        self,
        game_id: UUID,
        *,
        expected_turn: int,
        expected_move_count: int,
        board: Board,
        turn: int,
        winner: Optional[int],
    ) -> GameRecord:
        """
        Stores a move, but only if the game is still active and unchanged since it was read:
        `expected_turn` to move and `expected_move_count` moves played.
        """
        with self._lock:
            try:
                game = self._games[game_id]
            except KeyError as e:
                raise GameNotFound(f"Game {game_id} not found") from e

            if (
                game.status != STATUS_ACTIVE
                or game.turn != expected_turn
                or game.move_count != expected_move_count
            ):
                raise StaleGame(f"Game {game_id} changed since it was read")

            game.board = board
            game.turn = turn
            game.winner = winner
            game.move_count += 1
            if winner is not None:
                game.status = STATUS_FINISHED

            return copy(game)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
