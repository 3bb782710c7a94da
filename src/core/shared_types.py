"""
Type definitions used across layers
"""

from enum import StrEnum


class MoveStatus(StrEnum):
    DONE = "done"
    GO_AGAIN = "go again"
    OUT_OF_BOUNDS = "out of bounds"
    EMPTY_CELL = "empty cell"


class GameStatus(StrEnum):
    NOT_OVER = "not over"
    TIE = "tie"
    WINNER = "winner"
