"""
Exceptions raised by the responsive sizing engine.
"""


class ResponsiveImagesError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(ResponsiveImagesError, ValueError):
    """Raised for unknown breakpoints, oversized column spans and bad sizes."""


class EmptyCollection(ResponsiveImagesError, LookupError):
    """Raised when a size list with no entries is asked for a size."""
