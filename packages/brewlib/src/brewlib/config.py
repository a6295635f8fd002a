"""
Configuration for presenting calculation results.

Only display precision is configurable; calculation constants are
function parameters and are never read from the environment.
"""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from brewlib.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DisplayFormat(BaseModel):
    """Number of decimal places used when presenting each kind of value."""

    model_config = ConfigDict(frozen=True)

    gravity_places: int = Field(default=3, ge=0, description="Specific gravity, e.g. 1.050")
    abv_places: int = Field(default=2, ge=0, description="Alcohol by volume percentage")
    hops_places: int = Field(default=2, ge=0, description="Hop quantities in ounces")
    temperature_places: int = Field(default=1, ge=0, description="Temperatures")


DEFAULT_FORMAT = DisplayFormat()

ENVIRONMENT_VARIABLES: dict[str, str] = {
    "gravity_places": "BREWLIB_GRAVITY_PLACES",
    "abv_places": "BREWLIB_ABV_PLACES",
    "hops_places": "BREWLIB_HOPS_PLACES",
    "temperature_places": "BREWLIB_TEMPERATURE_PLACES",
}


def get_config() -> DisplayFormat:
    """
    Get display configuration from environment.

    Environment variables:
        BREWLIB_GRAVITY_PLACES: Decimal places for gravity values (default 3)
        BREWLIB_ABV_PLACES: Decimal places for ABV values (default 2)
        BREWLIB_HOPS_PLACES: Decimal places for hop quantities (default 2)
        BREWLIB_TEMPERATURE_PLACES: Decimal places for temperatures (default 1)

    Returns:
        DisplayFormat instance

    Raises:
        ConfigurationError: If a variable is set to something other than
            a non-negative integer
    """
    values: dict[str, str] = {}
    for name, variable in ENVIRONMENT_VARIABLES.items():
        raw = os.environ.get(variable)
        if raw is None or not raw.strip():
            continue

        try:
            DisplayFormat.model_validate({name: raw.strip()})
        except ValidationError as e:
            raise ConfigurationError(
                f"{variable} must be a non-negative integer, got {raw!r}"
            ) from e
        values[name] = raw.strip()

    config = DisplayFormat.model_validate(values)
    logger.debug("Loaded display configuration: %s", config)
    return config
