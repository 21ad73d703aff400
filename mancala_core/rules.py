from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .board import DEFAULT_SEEDS, Board, check_pit, check_player
from .errors import GameNotOverException, InvalidMoveException
from .player import Player, Store
from .state import GameResult, MoveOutcome, Phase

logger = logging.getLogger("mancala.rules")


def other_player(player_num: int) -> int:
    return 2 if player_num == 1 else 1


class GameRules(ABC):
    """
    Turn engine shared by the Mancala variants.

    Subclasses decide how stones are sown and captured. Everything else
    (validation, turn order, the end-of-game sweep and the result) lives here.
    Moves are validated before the board is touched, so a rejected move
    leaves the game exactly as it was.
    """

    variant_name = ''

    def __init__(self, seeds_per_pit: int = DEFAULT_SEEDS) -> None:
        self._board = Board(seeds_per_pit)
        self._current_player = 1
        self._game_over = False
        self._players: Tuple[Optional[Player], Optional[Player]] = (None, None)
        self.last_move: Optional[MoveOutcome] = None

    @property
    def data_structure(self) -> Board:
        return self._board

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def players(self) -> Tuple[Optional[Player], Optional[Player]]:
        return self._players

    @property
    def phase(self) -> Phase:
        if self._game_over:
            return Phase.GAME_OVER
        return Phase.awaiting(self._current_player)

    def get_num_stones(self, pit_num: int) -> int:
        return self._board.get_stone_count(pit_num)

    def get_store_count(self, player_num: int) -> int:
        return self._board.get_store_total(player_num)

    def is_side_empty(self, pit_num: int) -> bool:
        """True when every pit on the side containing `pit_num` is empty."""
        side = Board.side_of(pit_num)
        return all(self._board.get_stone_count(p) == 0 for p in Board.side_pits(side))

    def set_player(self, player_num: int) -> None:
        self._current_player = check_player(player_num)

    def legal_moves(self, player_num: Optional[int] = None) -> List[int]:
        """Non-empty pits on a player's side (default: the player to move)."""
        if self._game_over:
            return []
        player = self._current_player if player_num is None else check_player(player_num)
        return [p for p in Board.side_pits(player) if self._board.get_stone_count(p) > 0]

    def move_stones(self, start_pit: int, player_num: int) -> int:
        """Plays a move and returns the stones added to the mover's store this turn."""
        self._validate_move(start_pit, player_num)
        before = self._board.get_store_total(player_num)

        stopping_point = self.distribute_stones(start_pit)
        captured = self.capture_stones(stopping_point)
        gain = self._board.get_store_total(player_num) - before

        extra_turn = self.grants_extra_turn(stopping_point, player_num)
        if not extra_turn:
            self._current_player = other_player(player_num)
        logger.debug(
            "player %d moved from pit %d, stopped at %d, captured %d, next player %d",
            player_num, start_pit, stopping_point, captured, self._current_player,
        )
        game_over = self.is_game_over()
        self.last_move = MoveOutcome(
            player=player_num,
            start_pit=start_pit,
            stopping_point=stopping_point,
            captured=captured,
            store_gain=gain,
            extra_turn=extra_turn,
            next_player=self._current_player,
            game_over=game_over,
        )
        return gain

    def _validate_move(self, start_pit: int, player_num: int) -> None:
        check_pit(start_pit)
        if self._game_over:
            raise InvalidMoveException("Error: The game is over.")
        if player_num not in (1, 2):
            raise InvalidMoveException(f"Error: Unknown player {player_num!r}.")
        if player_num != self._current_player:
            raise InvalidMoveException(f"Error: It is not player {player_num}'s turn.")
        if Board.side_of(start_pit) != player_num:
            raise InvalidMoveException(f"Error: Pit {start_pit} is not on player {player_num}'s side.")
        if self._board.get_stone_count(start_pit) == 0:
            raise InvalidMoveException(f"Error: Pit {start_pit} is empty.")

    @abstractmethod
    def distribute_stones(self, start_pit: int) -> int:
        """Sows the stones of `start_pit` and returns the ring position where sowing stopped."""

    @abstractmethod
    def capture_stones(self, stopping_point: int) -> int:
        """Applies the variant's capture for the player to move; returns stones captured."""

    def grants_extra_turn(self, stopping_point: int, player_num: int) -> bool:
        return stopping_point == Board.store_position(player_num)

    def _sow(self, origin: int, stones: int, mover: int, skip_origin: bool = False) -> int:
        # One stone per position after `origin`, never into the opponent's store.
        skipped = Board.store_position(other_player(mover))
        position = origin
        while stones > 0:
            position = Board.next_position(position)
            if position == skipped or (skip_origin and position == origin):
                continue
            self._board.sow_into(position)
            stones -= 1
        return position

    def _lands_in_own_empty_pit(self, stopping_point: int) -> bool:
        if Board.store_owner(stopping_point) is not None:
            return False
        return (Board.side_of(stopping_point) == self._current_player
                and self._board.get_stone_count(stopping_point) == 1)

    def register_players(self, one: Player, two: Player) -> None:
        """Creates a store for each player and installs them on the board."""
        for number, player in ((1, one), (2, two)):
            store = Store(owner=player, total_stones=self._board.get_store_total(number))
            player.number = number
            player.store = store
            self._board.set_store(store, number)
        self._players = (one, two)

    def reset_board(self) -> None:
        self._board.set_up_pits()
        self._board.empty_stores()
        self._current_player = 1
        self._game_over = False
        self.last_move = None

    def is_game_over(self) -> bool:
        """
        Checks whether either side has run out of stones.

        The first time it finds an empty side it sweeps every stone left on
        the board into the store of the side it sits on, after which the
        result can be read.
        """
        if self._game_over:
            return True
        if not (self.is_side_empty(1) or self.is_side_empty(7)):
            return False
        for player_num in (1, 2):
            swept = sum(self._board.remove_stones(p) for p in Board.side_pits(player_num))
            if swept:
                self._board.add_to_store(player_num, swept)
                logger.debug("swept %d stones into player %d's store", swept, player_num)
        self._game_over = True
        logger.debug("game over: %d - %d", self.get_store_count(1), self.get_store_count(2))
        return True

    def get_result(self) -> GameResult:
        if not self._game_over:
            raise GameNotOverException()
        one = self._board.get_store_total(1)
        two = self._board.get_store_total(2)
        if one == two:
            return GameResult(one, two, 0, None)
        number = 1 if one > two else 2
        return GameResult(one, two, number, self._players[number - 1])

    def get_winner(self) -> Optional[Player]:
        """The winning player, or None on a tie."""
        return self.get_result().winner

    def __str__(self) -> str:
        return self._board.pretty()
