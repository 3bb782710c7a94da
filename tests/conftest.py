"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.models import GameModel
from src.mancala.game import Game

BuildGame = Callable[..., Game]


@pytest.fixture
def small_game() -> Game:
    """Two players (P0 moves first), three pits per row, one seed per pit."""
    return Game.new_game(initial_fill=1, player_names=["P0", "P1"], pits_per_row=3)


@pytest.fixture
def build_game() -> BuildGame:
    """Call the inner function with the rows, stores, and (optionally) the index of the player to move."""

    def _build(
        pits: list[list[int]],
        stores: list[int] | None = None,
        current_player: int = 0,
        player_names: list[str] | None = None,
    ) -> Game:
        names = player_names or [f"P{index}" for index in range(len(pits))]
        model = GameModel(
            player_names=names,
            pits=pits,
            stores=stores if stores is not None else [0] * len(pits),
            current_player=current_player,
        )
        return Game.from_model(model)

    return _build
