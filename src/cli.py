"""Play a game of mancala in the terminal: players take turns typing the (one-based) pit they want to sow from."""

import argparse
import logging
from typing import Callable, Optional

from src.api.models import GameResponse, MoveRequest, NewGameRequest
from src.core.exceptions import GameError
from src.core.models import GameModel
from src.core.shared_types import GameStatus, MoveStatus
from src.mancala.game import DEFAULT_INITIAL_FILL, DEFAULT_PLAYER_NAMES
from src.mancala.rendering import render_board
from src.mancala.side import DEFAULT_PITS_PER_ROW
from src.services.mancala_service import MancalaService

logger = logging.getLogger(__name__)

# Feedback printed after a move that keeps the same player at the table
MOVE_FEEDBACK: dict[MoveStatus, str] = {
    MoveStatus.GO_AGAIN: "Go again!",
    MoveStatus.OUT_OF_BOUNDS: "Out of bounds!",
    MoveStatus.EMPTY_CELL: "You can't select an empty cell!",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Relay-sowing mancala for the terminal")
    parser.add_argument("--fill", type=int, default=DEFAULT_INITIAL_FILL, help="Seeds per pit at the start")
    parser.add_argument("--pits", type=int, default=DEFAULT_PITS_PER_ROW, help="Pits per player row")
    parser.add_argument("--players", nargs="+", default=list(DEFAULT_PLAYER_NAMES), help="Player names, in turn order")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows every sowing)")
    return parser


def read_selection(read_line: Callable[[], str], write: Callable[[str], None]) -> int:
    """Keep asking until the player types a whole number. EOFError from `read_line` propagates."""
    while True:
        text = read_line()
        try:
            return int(text.strip())
        except ValueError:
            write("Invalid selection!")


def play(
    service: MancalaService,
    read_line: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> GameStatus:
    """Run the game loop until the game is over. Returns the final status. Reads from stdin and prints by default."""
    read_line = read_line or input
    write = write or print
    while True:
        game = service.get_game()
        write(render_board(_to_snapshot(game)))
        if game.status != GameStatus.NOT_OVER:
            break

        write(f"{game.current_player} move:")
        # the terminal counts pits from 1
        pit = read_selection(read_line, write) - 1
        response = service.make_move(MoveRequest(pit=pit))
        feedback = MOVE_FEEDBACK.get(response.status)
        if feedback:
            write(feedback)

    if game.status == GameStatus.WINNER:
        write(f"Winner: {game.winner}")
    else:
        write("Tie Game!")
    return game.status


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = MancalaService()
    try:
        service.new_game(
            NewGameRequest(
                initial_fill=args.fill,
                pits_per_row=args.pits,
                player_names=args.players,
            )
        )
    except GameError as error:
        print(f"Cannot start game: {error}")
        return 2

    try:
        play(service)
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed before the game ended")
        return 1
    return 0


def _to_snapshot(game: GameResponse) -> GameModel:
    return GameModel(
        player_names=game.player_names,
        pits=game.pits,
        stores=game.stores,
        current_player=game.turn,
    )


if __name__ == "__main__":
    raise SystemExit(main())
