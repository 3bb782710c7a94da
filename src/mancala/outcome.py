"""Decide whether the game has ended and who won. Pure function of the board, recomputed on every call."""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import GameStatus
from src.mancala.board import Board


@dataclass(frozen=True)
class Outcome:
    status: GameStatus
    winner: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.NOT_OVER


def evaluate_outcome(board: Board) -> Outcome:
    """
    The game ends as soon as any side has no seeds left in its pits.
    ----

    Then the highest store wins. A shared highest store is a tie (an empty table counts as a tie as well).
    """
    if board.sides and not any(side.is_exhausted() for side in board.sides):
        return Outcome(GameStatus.NOT_OVER)

    if not board.sides:
        return Outcome(GameStatus.TIE)

    best = max(side.store for side in board.sides)
    leaders = [side.name for side in board.sides if side.store == best]
    if len(leaders) == 1:
        return Outcome(GameStatus.WINNER, winner=leaders[0])
    return Outcome(GameStatus.TIE)
