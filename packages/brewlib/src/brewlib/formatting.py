"""
Fixed-point presentation of calculation results.

Values are rounded to a fixed number of decimal places (half-even on the
exact binary value), with no exponent notation and no thousands
separators. Trailing zeros are kept, so 1.05 formats as "1.050".
"""

from brewlib.config import DEFAULT_FORMAT, DisplayFormat


def format_fixed(value: float, places: int) -> str:
    """
    Format a number with exactly `places` digits after the decimal point.

    Example:
        >>> format_fixed(12.3456, 2)
        "12.35"
    """
    return f"{value:.{places}f}"


def format_gravity(value: float, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Format a specific gravity (3 places by default)."""
    return format_fixed(value, fmt.gravity_places)


def format_abv(value: float, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Format an alcohol by volume percentage (2 places by default)."""
    return format_fixed(value, fmt.abv_places)


def format_hops(value: float, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Format a hop quantity (2 places by default)."""
    return format_fixed(value, fmt.hops_places)


def format_temperature(value: float, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Format a temperature (1 place by default)."""
    return format_fixed(value, fmt.temperature_places)
