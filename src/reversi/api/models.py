from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Literal, Optional
from uuid import UUID

from reversi.othello.board import color_to_api, outcome_to_api
from reversi.store import GameRecord

Color = Literal["black", "white"]
Outcome = Literal["black", "white", "draw"]
Cell = Optional[Color]


class ApiModel(BaseModel):
    # The web client sends and expects camelCase keys.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateGameRequest(ApiModel):
    player_id: UUID
    creator_side: str = "random"

    @field_validator("creator_side", mode="before")
    @classmethod
    def normalize_creator_side(cls, v: object) -> str:
        if v in ["black", "white"]:
            return str(v)
        return "random"


class CreateGameResponse(ApiModel):
    game_id: UUID
    url: str


class JoinGameRequest(ApiModel):
    # Parsed by the route so a malformed id gets the same answer as in the URL.
    game_id: str
    player_id: UUID


class MoveRequest(ApiModel):
    player_id: UUID
    row: int
    col: int


class SerializedGame(BaseModel):
    id: UUID
    status: Literal["waiting", "active", "finished"]
    board: list[list[Cell]]
    turn: Color
    winner: Optional[Outcome]
    creator_side: Literal["black", "white", "random"]
    black_player_id: Optional[UUID]
    white_player_id: Optional[UUID]
    move_count: int

    @classmethod
    def from_record(cls, game: GameRecord) -> SerializedGame:
        return cls(
            id=game.id,
            status=game.status,  # type:ignore[arg-type]
            board=game.board.to_api(),  # type:ignore[arg-type]
            turn=color_to_api(game.turn),  # type:ignore[arg-type]
            winner=outcome_to_api(game.winner),  # type:ignore[arg-type]
            creator_side=game.creator_side,  # type:ignore[arg-type]
            black_player_id=game.black_player_id,
            white_player_id=game.white_player_id,
            move_count=game.move_count,
        )


class JoinedPlayer(BaseModel):
    side: Color


class JoinGameResponse(BaseModel):
    game: SerializedGame
    player: JoinedPlayer


class GameResponse(BaseModel):
    game: SerializedGame
