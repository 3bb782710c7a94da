"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameStatus, MoveStatus
from src.mancala.game import DEFAULT_INITIAL_FILL, DEFAULT_PLAYER_NAMES
from src.mancala.side import DEFAULT_PITS_PER_ROW

PlayerName = str


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    initial_fill: int = DEFAULT_INITIAL_FILL
    pits_per_row: int = DEFAULT_PITS_PER_ROW
    player_names: list[PlayerName] = list(DEFAULT_PLAYER_NAMES)

    @field_validator("initial_fill")
    @classmethod
    def validate_initial_fill(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(
                f"Initial fill cannot be negative. Got {value}."
            )
        return value

    @field_validator("pits_per_row")
    @classmethod
    def validate_pits_per_row(cls, value: int) -> int:
        if value < 1:
            raise InvalidRequestError(
                f"A row needs at least one pit. Got {value}."
            )
        return value

    @field_validator("player_names")
    @classmethod
    def validate_player_names(cls, value: list[PlayerName]) -> list[PlayerName]:
        names = [name.strip() for name in value]
        if not names:
            raise InvalidRequestError("At least one player is needed.")
        if any(name == "" for name in names):
            raise InvalidRequestError("Player names cannot be blank.")
        if len(set(names)) != len(names):
            raise InvalidRequestError(
                f"Player names must be unique. Got {', '.join(names)}."
            )
        return names


class MoveRequest(BaseModel):
    # zero-based. Out of range values are answered with MoveStatus.OUT_OF_BOUNDS, not rejected here.
    pit: int


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    player_names: list[PlayerName]
    pits: list[list[int]]
    stores: list[int]
    current_player: PlayerName
    turn: int  # index of current_player in player_names
    status: GameStatus
    winner: Optional[PlayerName]


class MoveResponse(BaseModel):
    status: MoveStatus
    game: GameResponse
