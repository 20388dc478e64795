"""Exceptions raised by the blueprint conversion pipeline."""


class ConversionError(Exception):
    """Custom exception for conversion errors."""


class PaletteMismatchError(ConversionError):
    """Raised when a pixel has no exact palette match during assembly."""


class TilesetError(ConversionError):
    """Raised when a tileset file cannot be read or parsed."""
