"""
Exception types for brewlib.

All exceptions inherit from BrewlibError for easy catching
of any library-related errors.
"""


class BrewlibError(Exception):
    """Base exception for all brewlib errors."""

    pass


class InvalidArgumentError(BrewlibError, ValueError):
    """
    Raised when a textual argument cannot be read as a number.

    Attributes:
        field: Semantic role of the rejected argument (e.g. "original gravity value")
        value: The raw text that was rejected
    """

    def __init__(self, field: str, value: object = None):
        self.field = field
        self.value = value
        super().__init__(f"Failed to treat {field} as a number")


class ConfigurationError(BrewlibError):
    """Raised when configuration is invalid."""

    pass
