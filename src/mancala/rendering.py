"""Text representation of a board snapshot (used by the CLI loop)."""

from src.core.models import GameModel

TURN_MARKER = ">"


def render_board(model: GameModel) -> str:
    """
    One line per player, in turn order. Pits are shown in sowing direction, the store last.
    ex. for two players, 3 pits per row, White to move:

                 (1)  (2)  (3)   store
        > White [ 1] [ 0] [ 2] [    1]
          Black [ 1] [ 1] [ 1] [    0]

    Reads from the model only.
    """
    name_width = max((len(name) for name in model.player_names), default=0)
    pits_per_row = len(model.pits[0]) if model.pits else 0

    # marker, space, name, space
    indent = " " * (name_width + 3)
    labels = " ".join(f"({number})".rjust(4) for number in range(1, pits_per_row + 1))
    lines = [f"{indent}{labels} {'store':>7}"]

    for index, name in enumerate(model.player_names):
        marker = TURN_MARKER if index == model.current_player else " "
        pits = " ".join(f"[{seeds:>2}]" for seeds in model.pits[index])
        lines.append(f"{marker} {name:<{name_width}} {pits} [{model.stores[index]:>5}]")
    return "\n".join(lines)
