from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Player:
    """A participant. `number` and `store` are bound when the players are registered."""
    name: str
    number: int = 0
    store: Optional['Store'] = field(default=None, repr=False)

    def store_count(self) -> int:
        return self.store.total_stones if self.store is not None else 0


@dataclass(eq=False)
class Store:
    """A player's scoring bin."""
    owner: Optional[Player] = None
    total_stones: int = 0

    def add_stones(self, amount: int) -> int:
        if amount < 0:
            raise ValueError('Cannot add a negative number of stones')
        self.total_stones += amount
        return self.total_stones

    def empty_store(self) -> int:
        """Sets the total to zero and returns what the store held."""
        held = self.total_stones
        self.total_stones = 0
        return held
