import logging
import typer
import uvicorn
from typing import Optional

from reversi.config import ServerConfig, get_log_level
from reversi.othello.board import Board, color_to_api, outcome_to_api
from reversi.othello.game import Game, InvalidMove


def setup_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def serve() -> None:
    def command(
        host: Optional[str] = typer.Option(None, "--host"),
        port: Optional[int] = typer.Option(None, "--port"),
    ) -> None:
        setup_logging()
        config = ServerConfig()

        uvicorn.run(
            "reversi.api.server:app",
            host=host or config.host,
            port=port or config.port,
            log_level=get_log_level().lower(),
        )

    typer.run(command)


def describe_game(game: Game) -> list[str]:
    black, white = game.board.count_pieces()
    lines = [f"black: {black} white: {white}"]

    if game.turn is not None:
        lines.append(f"to move: {color_to_api(game.turn)}")
        lines.append("moves: " + Board.moves_to_fields(game.board.get_moves(game.turn)))
    else:
        lines.append(f"result: {outcome_to_api(game.get_winner())}")

    return lines


def show_game() -> None:
    def command(moves: str = typer.Argument("")) -> None:
        try:
            game = Game.from_string(moves)
        except (InvalidMove, ValueError) as e:
            typer.echo(f"Could not replay moves: {e}", err=True)
            raise typer.Exit(code=1)

        game.board.show(game.turn)
        for line in describe_game(game):
            print(line)

    typer.run(command)
