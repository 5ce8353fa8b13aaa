import logging
from functools import lru_cache
from fastapi import Depends, FastAPI, HTTPException, status
from typing import Optional
from uuid import UUID

from reversi.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    JoinedPlayer,
    JoinGameRequest,
    JoinGameResponse,
    MoveRequest,
    SerializedGame,
)
from reversi.config import ServerConfig
from reversi.othello.board import color_to_api, in_bounds, opponent
from reversi.rate_limit import RateLimiter
from reversi.store import (
    STATUS_ACTIVE,
    GameNotFound,
    GameNotJoinable,
    GameRecord,
    GameStore,
    StaleGame,
)

logger = logging.getLogger(__name__)


class ServerState:
    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        if config is None:
            config = ServerConfig()

        self.config = config
        self.store = GameStore()
        self.rate_limiter = RateLimiter(
            max_requests=config.rate_limit_requests,
            window_seconds=config.rate_limit_window,
        )


@lru_cache
def get_server_state() -> ServerState:
    """Dependency that provides the server state, created on first request"""
    return ServerState()


app = FastAPI(title="Reversi")


def parse_game_id(game_id: str) -> UUID:
    try:
        return UUID(game_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid game id"
        )


def check_rate_limit(state: ServerState, player_id: UUID) -> None:
    if not state.rate_limiter.check(str(player_id)):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Too many requests"
        )


def get_game(state: ServerState, game_id: UUID) -> GameRecord:
    try:
        return state.store.get(game_id)
    except GameNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")


@app.post("/games", status_code=status.HTTP_201_CREATED)
async def create_game(
    payload: CreateGameRequest,
    state: ServerState = Depends(get_server_state),
) -> CreateGameResponse:
    check_rate_limit(state, payload.player_id)

    game = state.store.create(payload.player_id, payload.creator_side)
    return CreateGameResponse(game_id=game.id, url=f"/reversi/play/{game.id}")


@app.post("/games/join")
async def join_game(
    payload: JoinGameRequest,
    state: ServerState = Depends(get_server_state),
) -> JoinGameResponse:
    game_id = parse_game_id(payload.game_id)

    check_rate_limit(state, payload.player_id)

    try:
        game, color = state.store.join(game_id, payload.player_id)
    except GameNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    except GameNotJoinable as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Player {payload.player_id} joined game {game.id} as {color_to_api(color)}")

    return JoinGameResponse(
        game=SerializedGame.from_record(game),
        player=JoinedPlayer(side=color_to_api(color)),  # type:ignore[arg-type]
    )


@app.get("/games/{game_id}")
async def get_game_state(
    game_id: str,
    state: ServerState = Depends(get_server_state),
) -> SerializedGame:
    game = get_game(state, parse_game_id(game_id))
    return SerializedGame.from_record(game)


@app.post("/games/{game_id}/move")
async def play_move(
    game_id: str,
    payload: MoveRequest,
    state: ServerState = Depends(get_server_state),
) -> GameResponse:
    parsed_game_id = parse_game_id(game_id)

    if not in_bounds(payload.row, payload.col):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid square")

    check_rate_limit(state, payload.player_id)

    game = get_game(state, parsed_game_id)

    if game.status != STATUS_ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Game is not active"
        )

    # UUID comparison ignores the case the client used.
    if game.get_player_id(game.turn) != payload.player_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your turn")

    board = game.board.do_move(payload.row, payload.col, game.turn)

    if board is None:
        logger.info(f"Rejected move ({payload.row}, {payload.col}) in game {game.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid move")

    turn = board.next_turn(game.turn)
    winner = None

    if turn is None:
        winner = board.get_winner()
        turn = opponent(game.turn)
    elif turn == game.turn:
        logger.info(f"Game {game.id}: {color_to_api(opponent(turn))} has to pass")

    try:
        updated = state.store.update(
            game.id,
            expected_turn=game.turn,
            expected_move_count=game.move_count,
            board=board,
            turn=turn,
            winner=winner,
        )
    except StaleGame:
        logger.warning(f"Concurrent move in game {game.id} rejected")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Game changed, reload and retry"
        )

    logger.info(f"Game {game.id}: move ({payload.row}, {payload.col}) accepted")

    if winner is not None:
        logger.info(f"Game {game.id} finished, black/white discs: {board.count_pieces()}")

    return GameResponse(game=SerializedGame.from_record(updated))
