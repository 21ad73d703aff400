from __future__ import annotations


class MancalaError(Exception):
    """Base class for errors raised by the rule engine."""


class InvalidMoveException(MancalaError):
    """Raised when a move breaks turn order, pit ownership or emptiness rules."""

    def __init__(self, message: str = "Error: Invalid move.") -> None:
        super().__init__(message)


class PitNotFoundException(MancalaError, IndexError):
    """Raised for a pit index outside 1..12."""

    def __init__(self, pit: object = None) -> None:
        self.pit = pit
        if pit is None:
            super().__init__("Error: Pit not found.")
        else:
            super().__init__(f"Error: Pit {pit} not found.")


class GameNotOverException(MancalaError):
    def __init__(self) -> None:
        super().__init__("Error: Game is not over yet.")
