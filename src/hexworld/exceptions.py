"""Custom exceptions for hex world generation."""


class HexWorldError(Exception):
    """Base exception for hex world errors."""

    pass


class TileNotFoundError(HexWorldError, LookupError):
    """Raised when a tile is looked up outside the generated radius."""

    pass


class IncompleteWorldError(HexWorldError):
    """Raised when a world does not cover its whole hex disk."""

    pass
