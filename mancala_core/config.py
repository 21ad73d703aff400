from __future__ import annotations

import os

from .board import DEFAULT_SEEDS
from .variants import VARIANTS

VARIANT_ENV = "MANCALA_VARIANT"
SEEDS_ENV = "MANCALA_SEEDS"


def default_variant() -> str:
    value = os.getenv(VARIANT_ENV, "kalah").strip().lower()
    if value not in VARIANTS:
        raise ValueError(f"{VARIANT_ENV} must be one of {sorted(VARIANTS)}, got {value!r}")
    return value


def default_seeds() -> int:
    raw = os.getenv(SEEDS_ENV)
    if raw is None or raw.strip() == "":
        return DEFAULT_SEEDS
    try:
        seeds = int(raw)
    except ValueError:
        raise ValueError(f"{SEEDS_ENV} must be an integer, got {raw!r}") from None
    if seeds < 1:
        raise ValueError(f"{SEEDS_ENV} must be positive, got {seeds}")
    return seeds
