"""
Sowing rules: pick up the seeds of one pit and distribute them around the table.
----

The cursor walks the mover's pits, then the mover's store, then the pits of every following player
(from their second pit on; other players' stores are skipped), and wraps back to the mover's first pit.

**At each cell, in this order**

1. More than one seed in hand: drop one and keep going.
2. Last seed lands on a pit that already holds seeds: relay-capture. The pit's seeds join the hand and sowing continues.
3. Last seed lands on an empty pit: the move is done, the turn passes on.
4. Last seed lands in the mover's store: the mover goes again.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import SowingInvariantError
from src.core.shared_types import MoveStatus
from src.mancala.board import Board

logger = logging.getLogger(__name__)

# Sowing enters every other player's row at its second pit: their first pit is passed over
OTHER_ROW_ENTRY_PIT = 1


@dataclass(frozen=True)
class Cursor:
    """
    A cell in the traversal, relative to the mover.

    `offset` counts seats after the mover (0 is the mover). `slot` is a pit index, or `pits_per_row` for the mover's store.
    """

    offset: int
    slot: int

    def is_store(self, pits_per_row: int) -> bool:
        return self.offset == 0 and self.slot == pits_per_row

    def advance(self, pits_per_row: int, player_count: int) -> Self:
        offset, slot = self.offset, self.slot + 1
        while slot > _last_slot(offset, pits_per_row):
            offset = (offset + 1) % player_count
            slot = 0 if offset == 0 else OTHER_ROW_ENTRY_PIT
        return type(self)(offset, slot)


@dataclass(frozen=True)
class SowingResult:
    status: MoveStatus
    steps: int = 0


def sow(board: Board, pit_index: int) -> SowingResult:
    """
    Let the current player sow from `pit_index` (zero-based).

    Rejected moves (OUT_OF_BOUNDS, EMPTY_CELL) leave the board untouched.
    The traversal works on copies of the rows and the store which are written back only once the move ends.
    """
    mover = board.current_side()
    if not mover.has_pit(pit_index):
        logger.debug("%s selected pit %s: out of bounds", mover.name, pit_index)
        return SowingResult(MoveStatus.OUT_OF_BOUNDS)
    if mover.pits[pit_index] == 0:
        logger.debug("%s selected pit %s: empty", mover.name, pit_index)
        return SowingResult(MoveStatus.EMPTY_CELL)

    pits_per_row = board.pits_per_row
    player_count = board.player_count

    # rows[offset] is the row of the player sitting `offset` seats after the mover
    rows = [deepcopy(board.side_at_offset(offset).pits) for offset in range(player_count)]
    store = mover.store

    # every lap passes the store, which either ends the move or gains a seed
    max_steps = (board.total_seeds + 2) * lap_length(pits_per_row, player_count)

    hand = rows[0][pit_index]
    rows[0][pit_index] = 0
    cursor = Cursor(offset=0, slot=pit_index)
    steps = 0

    while True:
        cursor = cursor.advance(pits_per_row, player_count)
        steps += 1
        if steps > max_steps:
            raise SowingInvariantError(
                f"Sowing from pit {pit_index} did not end within {max_steps} steps."
            )
        on_store = cursor.is_store(pits_per_row)

        if hand >= 2:
            if on_store:
                store += 1
            else:
                rows[cursor.offset][cursor.slot] += 1
            hand -= 1
        elif hand == 1 and not on_store and rows[cursor.offset][cursor.slot] > 0:
            # relay-capture
            hand += rows[cursor.offset][cursor.slot]
            rows[cursor.offset][cursor.slot] = 0
        elif hand == 1 and not on_store:
            rows[cursor.offset][cursor.slot] += 1
            status = MoveStatus.DONE
            break
        elif hand == 1:
            store += 1
            status = MoveStatus.GO_AGAIN
            break
        else:
            raise SowingInvariantError(
                f"Empty hand at offset {cursor.offset}, slot {cursor.slot} after {steps} steps."
            )

    _commit(board, rows, store)
    if status == MoveStatus.DONE:
        board.pass_turn()

    logger.debug(
        "%s sowed pit %s: %s after %s steps", mover.name, pit_index, status, steps
    )
    return SowingResult(status, steps)


def lap_length(pits_per_row: int, player_count: int) -> int:
    """Number of cells visited in one full round of the table (the mover's store included)."""
    other_row = max(pits_per_row - OTHER_ROW_ENTRY_PIT, 0)
    return pits_per_row + 1 + (player_count - 1) * other_row


def _last_slot(offset: int, pits_per_row: int) -> int:
    """Only the mover's row continues into a store."""
    return pits_per_row if offset == 0 else pits_per_row - 1


def _commit(board: Board, rows: list[list[int]], store: int) -> None:
    """Write the working copy back. NOTE must run before the turn is passed: offsets are relative to the mover."""
    for offset, row in enumerate(rows):
        board.side_at_offset(offset).pits[:] = row
    board.current_side().store = store
