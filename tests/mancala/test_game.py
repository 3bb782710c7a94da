"""Unit tests for /src/mancala/game.py"""

import logging
from copy import deepcopy
from typing import Callable

import pytest

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import GameStatus, MoveStatus
from src.mancala.game import DEFAULT_INITIAL_FILL, Game
from src.mancala.outcome import Outcome

BuildGame = Callable[..., Game]


# -- CREATION LOGIC --
def test_new_game_defaults() -> None:
    game = Game.new_game(initial_fill=DEFAULT_INITIAL_FILL, player_names=["White", "Black"])
    model = game.to_model()
    assert model.player_names == ["White", "Black"]
    assert model.pits == [[4] * 6, [4] * 6]
    assert model.stores == [0, 0]
    assert model.current_player == 0
    assert game.current_player_name() == "White"
    assert game.total_seeds == 48


def test_new_game_invalid_players() -> None:
    with pytest.raises(GameStateError):
        _ = Game.new_game(initial_fill=4, player_names=["White", "White"])


def test_new_game_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.mancala.game"):
        _ = Game.new_game(initial_fill=2, player_names=["a", "b"], pits_per_row=3)
    assert "New game: a, b" in caplog.text


def test_game_from_model_roundtrip() -> None:
    model = GameModel(
        player_names=["a", "b"],
        pits=[[0, 3, 1], [2, 2, 0]],
        stores=[5, 1],
        current_player=1,
    )
    game = Game.from_model(model)
    assert game.to_model() == model
    assert game.current_player_name() == "b"


# -- PLAYING MOVES --
def test_scenario_go_again_then_done(small_game: Game) -> None:
    """Relay on own row into the store (go again), then relay on the opponent's row into an empty pit (done)"""
    assert small_game.apply_move(0) == MoveStatus.GO_AGAIN
    assert small_game.current_player_name() == "P0"
    model = small_game.to_model()
    assert model.pits == [[0, 0, 2], [1, 1, 1]]
    assert model.stores == [1, 0]

    assert small_game.apply_move(2) == MoveStatus.DONE
    assert small_game.current_player_name() == "P1"
    model = small_game.to_model()
    assert model.pits == [[1, 0, 0], [1, 0, 2]]
    assert model.stores == [2, 0]


@pytest.mark.parametrize("pit_index", [5, 3, -1])
def test_out_of_bounds(small_game: Game, pit_index: int) -> None:
    before = deepcopy(small_game.to_model())
    assert small_game.apply_move(pit_index) == MoveStatus.OUT_OF_BOUNDS
    assert small_game.to_model() == before


def test_empty_cell(small_game: Game) -> None:
    small_game.apply_move(0)
    before = small_game.to_model()
    assert small_game.apply_move(0) == MoveStatus.EMPTY_CELL
    assert small_game.to_model() == before
    assert small_game.current_player_name() == "P0"


def test_moves_act_on_the_player_to_move(build_game: BuildGame) -> None:
    """P1 is to move: their row is sown, P0's row is the one entered after the store"""
    game = build_game(pits=[[1, 1, 1], [0, 0, 2]], current_player=1)
    assert game.apply_move(2) == MoveStatus.DONE
    model = game.to_model()
    # store +1, P0's pit 1 relays (hand 2), P0's pit 2 gets one, last seed in P1's empty pit 0
    assert model.pits == [[1, 0, 2], [1, 0, 0]]
    assert model.stores == [0, 1]
    assert game.current_player_name() == "P0"


# -- GAME STATE --
def test_state_not_over(small_game: Game) -> None:
    assert small_game.state() == Outcome(GameStatus.NOT_OVER)


def test_state_after_last_move(build_game: BuildGame) -> None:
    game = build_game(pits=[[0, 0, 1], [1, 1, 1]], stores=[3, 3])
    assert game.apply_move(2) == MoveStatus.GO_AGAIN
    assert game.state() == Outcome(GameStatus.WINNER, winner="P0")


def test_state_tie(build_game: BuildGame) -> None:
    game = build_game(pits=[[0, 0, 1], [1, 1, 1]], stores=[2, 3])
    game.apply_move(2)
    assert game.state() == Outcome(GameStatus.TIE)


def test_snapshot_cannot_change_the_game(small_game: Game) -> None:
    model = small_game.to_model()
    model.pits[0][:] = [0, 0, 0]
    assert small_game.state() == Outcome(GameStatus.NOT_OVER)
