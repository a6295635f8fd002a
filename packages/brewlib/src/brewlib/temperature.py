"""
Temperature conversion between Celsius and Fahrenheit.

Each function accepts a number or its text form. Text that cannot be
read as a number raises InvalidArgumentError naming the temperature.
"""

from brewlib.formatting import format_temperature
from brewlib.parsing import to_float


def celsius_to_fahrenheit(celsius: float | int | str) -> float:
    """
    Convert degrees Celsius to degrees Fahrenheit.

    F = 1.8 × C + 32

    Args:
        celsius: Degrees Celsius

    Returns:
        Degrees Fahrenheit

    Raises:
        InvalidArgumentError: If text cannot be read as a number
    """
    c = to_float(celsius, "Celsius temperature")
    return 1.8 * c + 32.0


def fahrenheit_to_celsius(fahrenheit: float | int | str) -> float:
    """
    Convert degrees Fahrenheit to degrees Celsius.

    C = 5/9 × (F - 32)

    Args:
        fahrenheit: Degrees Fahrenheit

    Returns:
        Degrees Celsius

    Raises:
        InvalidArgumentError: If text cannot be read as a number
    """
    f = to_float(fahrenheit, "Fahrenheit temperature")
    return (5.0 / 9.0) * (f - 32.0)


# Presentation
format_value = format_temperature
