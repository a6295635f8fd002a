"""
Gravity calculations: alcohol by volume, temperature correction and
specific gravity to degrees Plato.

Gravity readings taken away from the 60°F reference temperature can be
corrected before ABV is calculated by passing the sample temperatures.
All arguments accept a number or its text form; text arguments are read
left to right and the first one that fails raises InvalidArgumentError
naming that argument.

Degenerate inputs are not rejected. An original gravity of 1.775 makes
the Daniels formula divide by zero and yields inf or nan, as IEEE 754
division does.
"""

import math

from brewlib.formatting import format_abv, format_gravity
from brewlib.parsing import parse_floats, to_float
from brewlib.temperature import celsius_to_fahrenheit

# Papazian's multiplier; regional variants use values near 131
PAPAZIAN_CONSTANT = 131.25

# Gravity change per 10°F away from the reference temperature
CORRECTION_CONSTANT = 0.003

REFERENCE_TEMPERATURE_F = 60

Number = float | int | str


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics: x/0 is ±inf, 0/0 is nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _read_abv_arguments(
    og: Number,
    fg: Number,
    ot: Number | None,
    ft: Number | None,
) -> tuple[float, float]:
    """Read OG, FG, OT, FT in that order and correct both gravities when temperatures are given."""
    if (ot is None) != (ft is None):
        raise TypeError("ot and ft must be given together")

    arguments = [
        (og, "original gravity value"),
        (fg, "final gravity value"),
    ]
    if ot is not None:
        arguments += [
            (ot, "temperature of initial gravity sample"),
            (ft, "temperature of final gravity sample"),
        ]

    values = parse_floats(*arguments)
    if len(values) == 2:
        return values[0], values[1]

    _og, _fg, _ot, _ft = values
    return temp_adjust_fahrenheit(_og, _ot), temp_adjust_fahrenheit(_fg, _ft)


def abv_daniels(
    og: Number,
    fg: Number,
    ot: Number | None = None,
    ft: Number | None = None,
) -> float:
    """
    Calculate alcohol by volume with the equation attributed to Ray Daniels.

    ABV = (76.08 × (OG - FG) / (1.775 - OG)) × (FG / 0.794)

    When sample temperatures are given, both gravities are first
    corrected to 60°F.

    Args:
        og: Original gravity
        fg: Final gravity
        ot: Fahrenheit temperature of the original gravity sample (optional)
        ft: Fahrenheit temperature of the final gravity sample (optional)

    Returns:
        ABV percentage

    Raises:
        InvalidArgumentError: If a text argument cannot be read as a number
    """
    _og, _fg = _read_abv_arguments(og, fg, ot, ft)
    return _divide(76.08 * (_og - _fg), 1.775 - _og) * (_fg / 0.794)


def abv_papazian(
    og: Number,
    fg: Number,
    ot: Number | None = None,
    ft: Number | None = None,
    constant: float = PAPAZIAN_CONSTANT,
) -> float:
    """
    Calculate alcohol by volume with the equation attributed to Charlie Papazian.

    ABV = (OG - FG) × constant

    When sample temperatures are given, both gravities are first
    corrected to 60°F.

    Args:
        og: Original gravity
        fg: Final gravity
        ot: Fahrenheit temperature of the original gravity sample (optional)
        ft: Fahrenheit temperature of the final gravity sample (optional)
        constant: Multiplier, a value in the neighbourhood of 131

    Returns:
        ABV percentage

    Raises:
        InvalidArgumentError: If a text argument cannot be read as a number
    """
    _og, _fg = _read_abv_arguments(og, fg, ot, ft)
    return (_og - _fg) * constant


def temp_adjust_fahrenheit(
    gravity: Number,
    temp: Number,
    constant: float = CORRECTION_CONSTANT,
) -> float:
    """
    Correct a gravity reading taken at `temp` °F to 60°F.

    corrected = gravity + ((temp - 60) / 10 × constant)

    Args:
        gravity: Measured gravity
        temp: Fahrenheit temperature of the sample
        constant: Gravity change per 10°F, a value in the neighbourhood of 0.003

    Returns:
        Corrected gravity

    Raises:
        InvalidArgumentError: If a text argument cannot be read as a number
    """
    _gravity, _temp = parse_floats((gravity, "gravity"), (temp, "temperature"))
    return _gravity + ((_temp - REFERENCE_TEMPERATURE_F) / 10 * constant)


def temp_adjust_celsius(
    gravity: Number,
    temp: Number,
    constant: float = CORRECTION_CONSTANT,
) -> float:
    """
    Correct a gravity reading taken at `temp` °C to 60°F.

    The temperature is converted to Fahrenheit and the Fahrenheit
    correction applied.

    Raises:
        InvalidArgumentError: If a text argument cannot be read as a number
    """
    _gravity, _temp = parse_floats((gravity, "gravity"), (temp, "temperature"))
    return temp_adjust_fahrenheit(_gravity, celsius_to_fahrenheit(_temp), constant)


def specific_to_plato(specific: Number) -> float:
    """
    Convert specific gravity to degrees Plato.

    Uses the approximation: Plato = (SG - 1) × 1000 / 4

    Args:
        specific: Specific gravity (e.g., 1.050)

    Returns:
        Degrees Plato, or 0.0 when the gravity is not positive

    Raises:
        InvalidArgumentError: If text cannot be read as a number
    """
    sg = to_float(specific, "specific gravity value")
    if sg > 0:
        return (sg - 1) * 1000 / 4
    return 0.0


# Presentation; format_abv is re-exported from brewlib.formatting
format_value = format_gravity
