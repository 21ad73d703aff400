from __future__ import annotations

import logging

from .board import Board
from .rules import GameRules

logger = logging.getLogger("mancala.ayo")


class AyoRules(GameRules):
    """
    Ayo: relay sowing. When the last stone of a lap lands in a pit that
    already held stones, that pit is lifted and sowing carries on from it.
    A lap never drops a stone back into the pit it was lifted from.

    The relay ends in the mover's store (another turn) or in an empty pit.
    An empty pit on the mover's side captures the opposite pit's stones;
    the landing stone stays put.
    """

    variant_name = 'ayo'

    def distribute_stones(self, start_pit: int) -> int:
        board = self.data_structure
        mover = Board.side_of(start_pit)
        position = start_pit
        laps = 0
        while True:
            stones = board.remove_stones(position)
            position = self._sow(position, stones, mover, skip_origin=True)
            laps += 1
            if Board.store_owner(position) is not None or board.get_stone_count(position) == 1:
                break
        if laps > 1:
            logger.debug("relay from pit %d ran %d laps, stopped at %d", start_pit, laps, position)
        return position

    def capture_stones(self, stopping_point: int) -> int:
        if not self._lands_in_own_empty_pit(stopping_point):
            return 0
        board = self.data_structure
        opposite = Board.opposite(stopping_point)
        captured = board.remove_stones(opposite)
        if captured:
            board.add_to_store(self.current_player, captured)
            logger.debug("pit %d captured %d stones from pit %d", stopping_point, captured, opposite)
        return captured
