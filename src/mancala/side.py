"""One player's half of the board: a row of pits and a personal store."""

from dataclasses import dataclass, field
from typing import Self

# A classic Kalah row has six pits. Adjustable per game through Board.new
DEFAULT_PITS_PER_ROW = 6


@dataclass
class Side:
    name: str
    pits: list[int]
    store: int = field(default=0)

    @classmethod
    def filled(cls, name: str, initial_fill: int, pits_per_row: int) -> Self:
        """A fresh side: every pit holds `initial_fill` seeds and the store is empty."""
        return cls(name=name, pits=[initial_fill] * pits_per_row, store=0)

    @property
    def seeds_in_pits(self) -> int:
        return sum(self.pits)

    @property
    def total_seeds(self) -> int:
        return self.seeds_in_pits + self.store

    def is_exhausted(self) -> bool:
        """No seeds left to pick up on this side. Ends the game."""
        return self.seeds_in_pits == 0

    def has_pit(self, pit_index: int) -> bool:
        return 0 <= pit_index < len(self.pits)
