class RogueMapError(Exception):
    """Base exception for the roguemap project."""


class GridError(RogueMapError, ValueError):
    """Raised when a grid cannot be constructed (bad dimensions, malformed rows)."""


class OutOfBoundsError(RogueMapError, IndexError):
    """Raised when a coordinate or index falls outside the grid."""


class ConfigError(RogueMapError, ValueError):
    """Raised for invalid or unreadable settings."""
