"""Custom exception hierarchy for the word grid engine."""


class WordGridError(Exception):
    """Base exception for word grid failures."""


class GridLayoutError(WordGridError):
    """Raised when a textual grid layout cannot be parsed."""


class GridBoundsError(WordGridError):
    """Raised when a cell is addressed directly outside the grid."""
