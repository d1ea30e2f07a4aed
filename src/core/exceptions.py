"""
Custom exceptions used across layers.

NOTE: GameError derives from Exception (not ValueError) so a pydantic validator that raises one
propagates it unchanged instead of wrapping it into a ValidationError.
"""


class GameError(Exception):
    """Top-level exception for anything raised on purpose by this package."""


class BoardGenerationError(GameError):
    """The generator could not honour its placement rules. Always a programming error, never bad luck."""


class BoardNotationError(GameError):
    """Board text could not be parsed."""


class InvalidRequestError(GameError):
    """A request from the presentation layer did not pass validation."""
