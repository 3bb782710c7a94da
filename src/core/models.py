"""
Boundary layer data model(s).

These objects can be used to communicate with the Service and with anything that only needs to look at a game
(the renderer, the CLI loop). A GameModel is a detached copy: changing it never changes the Game it was taken from.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PlayerName = str
Seeds = int


@dataclass
class GameModel:
    """Transport-safe snapshot of a mancala board: one entry per player, in turn order."""

    player_names: list[PlayerName]
    pits: list[list[Seeds]]
    stores: list[Seeds]
    current_player: int
