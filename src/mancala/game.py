"""
The Game class is the entrypoint into the domain layer for the service layer and the CLI loop.
It only delegates: the Board keeps the seeds, src/mancala/sowing.py plays a move, src/mancala/outcome.py judges the result.
"""

import logging
from dataclasses import dataclass
from typing import Self

from src.core.models import GameModel
from src.core.shared_types import MoveStatus
from src.mancala.board import Board
from src.mancala.outcome import Outcome, evaluate_outcome
from src.mancala.side import DEFAULT_PITS_PER_ROW
from src.mancala.sowing import sow

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_FILL = 4
DEFAULT_PLAYER_NAMES = ["White", "Black"]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board

    @classmethod
    def new_game(
        cls,
        initial_fill: int,
        player_names: list[str],
        pits_per_row: int = DEFAULT_PITS_PER_ROW,
    ) -> Self:
        """Fresh board. The first name in `player_names` moves first."""
        board = Board.new(initial_fill, player_names, pits_per_row)
        logger.info(
            "New game: %s, %s pits per row, %s seeds per pit",
            ", ".join(player_names),
            pits_per_row,
            initial_fill,
        )
        return cls(board)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Continue from a snapshot (for instance to set up a specific position)."""
        return cls(Board.from_model(model))

    def to_model(self) -> GameModel:
        return self.board.to_model()

    @property
    def total_seeds(self) -> int:
        return self.board.total_seeds

    def current_player_name(self) -> str:
        return self.board.current_side().name

    def apply_move(self, pit_index: int) -> MoveStatus:
        """Current player sows from the zero-based `pit_index`. Rejections come back as a status, never raised."""
        return sow(self.board, pit_index).status

    def state(self) -> Outcome:
        return evaluate_outcome(self.board)
