"""
brewlib: Home-brewing calculations.

Provides alcohol by volume, gravity temperature correction, Plato,
hop quantity and temperature conversions, plus consistent formatting
of the results for display.
"""

from brewlib.temperature import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
)
from brewlib.gravity import (
    PAPAZIAN_CONSTANT,
    CORRECTION_CONSTANT,
    abv_daniels,
    abv_papazian,
    temp_adjust_fahrenheit,
    temp_adjust_celsius,
    specific_to_plato,
)
from brewlib.hops import aau_to_ounces_aa
from brewlib.formatting import (
    format_gravity,
    format_abv,
    format_hops,
    format_temperature,
)
from brewlib.config import (
    DisplayFormat,
    DEFAULT_FORMAT,
    get_config,
)
from brewlib.exceptions import (
    BrewlibError,
    InvalidArgumentError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Temperature
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    # Gravity
    "PAPAZIAN_CONSTANT",
    "CORRECTION_CONSTANT",
    "abv_daniels",
    "abv_papazian",
    "temp_adjust_fahrenheit",
    "temp_adjust_celsius",
    "specific_to_plato",
    # Hops
    "aau_to_ounces_aa",
    # Formatting
    "format_gravity",
    "format_abv",
    "format_hops",
    "format_temperature",
    # Configuration
    "DisplayFormat",
    "DEFAULT_FORMAT",
    "get_config",
    # Exceptions
    "BrewlibError",
    "InvalidArgumentError",
    "ConfigurationError",
]
