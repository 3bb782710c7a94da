"""Orchestration of communication from the request/response models to the domain layer (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import GameResponse, MoveRequest, MoveResponse, NewGameRequest
from src.core.exceptions import GameStateError
from src.mancala.game import Game

logger = logging.getLogger(__name__)


class MancalaService:
    """
    Serves a single game.

    NOTE: not thread-safe. A host with concurrent callers must serialise calls per service instance.
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game

    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Start over with a fresh board. Replaces any game in progress."""
        self.game = Game.new_game(
            initial_fill=request.initial_fill,
            player_names=request.player_names,
            pits_per_row=request.pits_per_row,
        )
        return self._create_game_response(self.game)

    def get_game(self) -> GameResponse:
        """Retrieve current game state."""
        return self._create_game_response(self._require_game())

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Let the current player sow from the requested pit."""
        game = self._require_game()
        player = game.current_player_name()
        status = game.apply_move(request.pit)
        logger.info("%s played pit %s: %s", player, request.pit, status)
        return MoveResponse(status=status, game=self._create_game_response(game))

    # -- Internal helpers --
    def _require_game(self) -> Game:
        if self.game is None:
            raise GameStateError("No game in progress. Start a new game first.")
        return self.game

    def _create_game_response(self, game: Game) -> GameResponse:
        model = game.to_model()
        outcome = game.state()
        return GameResponse(
            player_names=model.player_names,
            pits=model.pits,
            stores=model.stores,
            current_player=game.current_player_name(),
            turn=model.current_player,
            status=outcome.status,
            winner=outcome.winner,
        )
