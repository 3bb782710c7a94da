"""The Board holds every player's Side and knows whose turn it is. Sowing rules live in src/mancala/sowing.py"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.mancala.side import DEFAULT_PITS_PER_ROW, Side


@dataclass
class Board:
    sides: list[Side]
    current_index: int = 0

    @classmethod
    def new(
        cls,
        initial_fill: int,
        player_names: list[str],
        pits_per_row: int = DEFAULT_PITS_PER_ROW,
    ) -> Self:
        """One Side per name (in turn order), every pit filled with `initial_fill` seeds. The first name moves first."""
        if initial_fill < 0:
            raise GameStateError(
                f"Cannot create board. Initial fill must be non-negative, got {initial_fill}."
            )
        if pits_per_row < 1:
            raise GameStateError(
                f"Cannot create board. Need at least one pit per row, got {pits_per_row}."
            )
        _validate_names(player_names)
        sides = [Side.filled(name, initial_fill, pits_per_row) for name in player_names]
        return cls(sides=sides, current_index=0)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild a board from a snapshot. The board does not share any list with the model."""
        _validate_names(model.player_names)
        if not (len(model.pits) == len(model.stores) == len(model.player_names)):
            raise GameStateError(
                "Snapshot needs exactly one row of pits and one store per player."
            )
        row_lengths = {len(row) for row in model.pits}
        if len(row_lengths) != 1 or 0 in row_lengths:
            raise GameStateError(
                f"Every row must hold the same, positive number of pits. Got lengths {sorted(row_lengths)}."
            )
        if any(seeds < 0 for row in model.pits for seeds in row) or any(
            seeds < 0 for seeds in model.stores
        ):
            raise GameStateError("Pits and stores cannot hold a negative number of seeds.")
        if not 0 <= model.current_player < len(model.player_names):
            raise GameStateError(
                f"Invalid current player index: {model.current_player}."
            )

        sides = [
            Side(name=name, pits=list(row), store=store)
            for name, row, store in zip(model.player_names, model.pits, model.stores)
        ]
        return cls(sides=sides, current_index=model.current_player)

    def to_model(self) -> GameModel:
        """Detached snapshot (deep copies of every row)."""
        return GameModel(
            player_names=[side.name for side in self.sides],
            pits=[deepcopy(side.pits) for side in self.sides],
            stores=[side.store for side in self.sides],
            current_player=self.current_index,
        )

    @property
    def pits_per_row(self) -> int:
        return len(self.sides[0].pits)

    @property
    def player_count(self) -> int:
        return len(self.sides)

    @property
    def total_seeds(self) -> int:
        return sum(side.total_seeds for side in self.sides)

    def current_side(self) -> Side:
        return self.sides[self.current_index]

    def side_at_offset(self, offset: int) -> Side:
        """The side `offset` seats after the current player, wrapping around the table."""
        return self.sides[(self.current_index + offset) % self.player_count]

    def pass_turn(self) -> None:
        self.current_index = (self.current_index + 1) % self.player_count


def _validate_names(player_names: list[str]) -> None:
    if not player_names:
        raise GameStateError("Cannot create board without any players.")
    if len(set(player_names)) != len(player_names):
        raise GameStateError(
            f"Player names must be unique. Got {', '.join(player_names)}."
        )
