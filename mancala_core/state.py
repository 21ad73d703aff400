from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .player import Player


class Phase(Enum):
    AWAITING_PLAYER_ONE = 1
    AWAITING_PLAYER_TWO = 2
    GAME_OVER = 3

    @classmethod
    def awaiting(cls, player_num: int) -> 'Phase':
        return cls.AWAITING_PLAYER_ONE if player_num == 1 else cls.AWAITING_PLAYER_TWO


@dataclass(frozen=True)
class MoveOutcome:
    """What happened during one accepted move."""
    player: int
    start_pit: int
    stopping_point: int
    captured: int
    store_gain: int  # sown into store + captured
    extra_turn: bool
    next_player: int
    game_over: bool


@dataclass(frozen=True)
class GameResult:
    """Final store totals. winner_number is 0 on a tie."""
    store_one: int
    store_two: int
    winner_number: int
    winner: Optional[Player] = None

    @property
    def is_tie(self) -> bool:
        return self.winner_number == 0
