from __future__ import annotations

# Facade module that re-exports the Mancala core API.
# Tests and drivers import from here; the logic lives under mancala_core/*.

from mancala_core.board import (
    DEFAULT_SEEDS,
    NUM_PITS,
    PITS_PER_SIDE,
    SOWING_RING,
    STORE_ONE,
    STORE_TWO,
    Board,
    Pit,
)
from mancala_core.errors import (
    GameNotOverException,
    InvalidMoveException,
    MancalaError,
    PitNotFoundException,
)
from mancala_core.player import Player, Store
from mancala_core.state import GameResult, MoveOutcome, Phase
from mancala_core.rules import GameRules, other_player
from mancala_core.kalah import KalahRules
from mancala_core.ayo import AyoRules
from mancala_core.variants import VARIANTS, make_rules
from mancala_core.config import default_seeds, default_variant


def main() -> None:
    # CLI driver delegated to mancala_core.cli
    from mancala_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
