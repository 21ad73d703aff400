from __future__ import annotations

import logging

from .board import Board
from .rules import GameRules

logger = logging.getLogger("mancala.kalah")


class KalahRules(GameRules):
    """
    Kalah: one lap of sowing. A last stone in the mover's store earns another
    turn; a last stone in an empty pit on the mover's side captures it along
    with everything in the opposite pit.
    """

    variant_name = 'kalah'

    def distribute_stones(self, start_pit: int) -> int:
        stones = self.data_structure.remove_stones(start_pit)
        return self._sow(start_pit, stones, Board.side_of(start_pit))

    def capture_stones(self, stopping_point: int) -> int:
        if not self._lands_in_own_empty_pit(stopping_point):
            return 0
        board = self.data_structure
        opposite = Board.opposite(stopping_point)
        captured = board.remove_stones(stopping_point) + board.remove_stones(opposite)
        board.add_to_store(self.current_player, captured)
        logger.debug("pits %d and %d captured: %d stones", stopping_point, opposite, captured)
        return captured
