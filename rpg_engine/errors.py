"""
Error taxonomy shared by the engine and the game.

None of these are fatal: the console loops recover from
InvalidInput and InvalidAction by reprompting, and the save layer
recovers from SaveFileError by falling back to a fresh player.
"""


class GameError(Exception):
    """Base class for recoverable game errors."""


class InvalidInput(GameError):
    """Non-numeric or out-of-range menu/item choice."""


class InvalidAction(GameError):
    """A well-formed command that is not allowed right now."""


class SaveFileError(GameError):
    """Missing, unreadable or corrupt save file."""
