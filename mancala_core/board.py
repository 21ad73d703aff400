from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import PitNotFoundException
from .player import Store

NUM_PITS = 12
PITS_PER_SIDE = 6
DEFAULT_SEEDS = 4

# Stores share the sowing ring with the pits; these are their positions in it.
STORE_ONE = 13
STORE_TWO = 14

# Counter-clockwise sowing order.
SOWING_RING: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, STORE_ONE, 7, 8, 9, 10, 11, 12, STORE_TWO)


@dataclass
class Pit:
    stone_count: int = 0

    def add_stone(self) -> None:
        self.stone_count += 1

    def remove_stones(self) -> int:
        taken = self.stone_count
        self.stone_count = 0
        return taken


def check_pit(pit: int) -> int:
    """Validates a pit number and returns it."""
    if isinstance(pit, bool) or not isinstance(pit, int) or pit < 1 or pit > NUM_PITS:
        raise PitNotFoundException(pit)
    return pit


def check_player(player_num: int) -> int:
    if player_num not in (1, 2):
        raise ValueError(f'Player number must be 1 or 2, got {player_num!r}')
    return player_num


class Board:
    """Twelve pits and two stores. Pits 1-6 are player one's side, 7-12 player two's."""

    def __init__(self, seeds_per_pit: int = DEFAULT_SEEDS) -> None:
        if seeds_per_pit < 1:
            raise ValueError('seeds_per_pit must be positive')
        self.seeds_per_pit = seeds_per_pit
        self._pits: List[Pit] = [Pit() for _ in range(NUM_PITS)]
        # Anonymous stores until players are registered.
        self._stores: List[Store] = [Store(), Store()]
        self.set_up_pits()

    # Pits

    def get_stone_count(self, pit: int) -> int:
        return self._pits[check_pit(pit) - 1].stone_count

    def set_stone_count(self, pit: int, count: int) -> None:
        check_pit(pit)
        if count < 0:
            raise ValueError('Stone count cannot be negative')
        self._pits[pit - 1].stone_count = count

    def add_stones(self, pit: int, count: int) -> None:
        self.set_stone_count(pit, self.get_stone_count(pit) + count)

    def add_stone(self, pit: int) -> None:
        self._pits[check_pit(pit) - 1].add_stone()

    def remove_stones(self, pit: int) -> int:
        """Empties a pit and returns the number of stones it held."""
        return self._pits[check_pit(pit) - 1].remove_stones()

    def set_up_pits(self) -> None:
        for pit in self._pits:
            pit.stone_count = self.seeds_per_pit

    def pit_counts(self) -> Tuple[int, ...]:
        return tuple(p.stone_count for p in self._pits)

    # Stores

    def set_store(self, store: Store, player_num: int) -> None:
        self._stores[check_player(player_num) - 1] = store

    def get_store(self, player_num: int) -> Store:
        return self._stores[check_player(player_num) - 1]

    def get_store_total(self, player_num: int) -> int:
        return self.get_store(player_num).total_stones

    def add_to_store(self, player_num: int, count: int) -> int:
        return self.get_store(player_num).add_stones(count)

    def empty_stores(self) -> None:
        for store in self._stores:
            store.empty_store()

    # Geometry

    @staticmethod
    def side_of(pit: int) -> int:
        """Returns the player number owning a pit."""
        return 1 if check_pit(pit) <= PITS_PER_SIDE else 2

    @staticmethod
    def side_pits(player_num: int) -> range:
        first = 1 if check_player(player_num) == 1 else PITS_PER_SIDE + 1
        return range(first, first + PITS_PER_SIDE)

    @staticmethod
    def opposite(pit: int) -> int:
        return NUM_PITS + 1 - check_pit(pit)

    @staticmethod
    def store_position(player_num: int) -> int:
        return STORE_ONE if check_player(player_num) == 1 else STORE_TWO

    @staticmethod
    def store_owner(position: int) -> Optional[int]:
        """Returns the owning player for a store position, None for a pit."""
        if position == STORE_ONE:
            return 1
        if position == STORE_TWO:
            return 2
        return None

    @staticmethod
    def next_position(position: int) -> int:
        idx = SOWING_RING.index(position)
        return SOWING_RING[(idx + 1) % len(SOWING_RING)]

    def sow_into(self, position: int) -> None:
        """Drops one stone at a ring position (pit or store)."""
        owner = self.store_owner(position)
        if owner is None:
            self.add_stone(position)
        else:
            self.add_to_store(owner, 1)

    # Totals

    def side_total(self, player_num: int) -> int:
        return sum(self.get_stone_count(p) for p in self.side_pits(player_num))

    def total_stones(self) -> int:
        return sum(self.pit_counts()) + self.get_store_total(1) + self.get_store_total(2)

    def initial_total(self) -> int:
        return NUM_PITS * self.seeds_per_pit

    def pretty(self) -> str:
        """Text layout: player two's pits (12 down to 7) on top, stores in the middle row, player one's pits below."""
        counts = self.pit_counts()
        top = _tab_row(counts[i - 1] for i in range(NUM_PITS, PITS_PER_SIDE, -1))
        middle = f"{self.get_store_total(2)}" + "\t" * 7 + f"{self.get_store_total(1)}"
        bottom = _tab_row(counts[i - 1] for i in range(1, PITS_PER_SIDE + 1))
        return "\n".join([top, middle, bottom])


def _tab_row(values: Iterable[int]) -> str:
    return "\t" + "".join(f"{v}\t" for v in values)
