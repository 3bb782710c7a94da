"""Exceptions raised by the domain, service and API layers."""


class GameError(Exception):
    """Base class for recoverable errors the caller is expected to report."""


class GameStateError(GameError):
    """The game cannot be created or used in its current state."""


class InvalidRequestError(GameError):
    """A request model received data it cannot accept."""


class SowingInvariantError(RuntimeError):
    """
    The sowing traversal reached a cell with an empty hand.

    Unreachable for a well-formed board: signals a programming error, never a game condition.
    """
