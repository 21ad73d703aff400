from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import default_seeds, default_variant
from .errors import InvalidMoveException, PitNotFoundException
from .player import Player
from .rules import GameRules
from .variants import VARIANTS, make_rules


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Two-player Mancala (Kalah / Ayo) on the console')
    parser.add_argument('--variant', choices=sorted(VARIANTS), default=None,
                        help='Rule set (default: $MANCALA_VARIANT or kalah)')
    parser.add_argument('--seeds', type=int, default=None,
                        help='Stones per pit at setup (default: $MANCALA_SEEDS or 4)')
    parser.add_argument('--p1', default='Player 1', help='Name of player one (pits 1-6)')
    parser.add_argument('--p2', default='Player 2', help='Name of player two (pits 7-12)')
    parser.add_argument('--verbose', action='store_true', help='Log engine decisions to stderr')
    return parser


def prompt_move(rules: GameRules, player: Player) -> Optional[int]:
    """Asks for a pit until one parses. Returns None when input runs out."""
    while True:
        try:
            text = input(f"{player.name}, choose a pit {rules.legal_moves()}: ").strip()
        except EOFError:
            return None
        try:
            return int(text)
        except ValueError:
            print('Could not parse. Try again.')


def play(rules: GameRules, one: Player, two: Player) -> Optional[Player]:
    """Runs a hot-seat game to completion. Returns the winner (None on a tie or abort)."""
    rules.register_players(one, two)
    print(rules)
    while not rules.is_game_over():
        player = one if rules.current_player == 1 else two
        pit = prompt_move(rules, player)
        if pit is None:
            print('\nGame abandoned.')
            return None
        try:
            gained = rules.move_stones(pit, player.number)
        except (InvalidMoveException, PitNotFoundException) as exc:
            print(exc)
            continue
        print(rules)
        outcome = rules.last_move
        if outcome is not None and outcome.captured:
            print(f"{player.name} captured {outcome.captured} stones.")
        if outcome is not None and outcome.extra_turn and not outcome.game_over:
            print(f"{player.name} gets another turn ({gained} stones to store).")

    result = rules.get_result()
    print(f"Final score: {one.name} {result.store_one}, {two.name} {result.store_two}")
    if result.is_tie:
        print("It's a tie!")
    else:
        name = result.winner.name if result.winner else f"Player {result.winner_number}"
        print(f"{name} wins!")
    return result.winner


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seeds is not None and args.seeds < 1:
        parser.error("--seeds must be positive")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    variant = args.variant or default_variant()
    seeds = args.seeds if args.seeds is not None else default_seeds()
    rules = make_rules(variant, seeds)
    print(f"Playing {variant.capitalize()} with {seeds} stones per pit.")
    play(rules, Player(args.p1), Player(args.p2))
