from __future__ import annotations

from typing import Dict, Type

from .ayo import AyoRules
from .board import DEFAULT_SEEDS
from .kalah import KalahRules
from .rules import GameRules

VARIANTS: Dict[str, Type[GameRules]] = {
    KalahRules.variant_name: KalahRules,
    AyoRules.variant_name: AyoRules,
}


def make_rules(variant: str, seeds_per_pit: int = DEFAULT_SEEDS) -> GameRules:
    """Builds the rule engine for a variant name ('kalah' or 'ayo')."""
    try:
        cls = VARIANTS[variant.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown variant {variant!r}; expected one of {sorted(VARIANTS)}") from None
    return cls(seeds_per_pit)
