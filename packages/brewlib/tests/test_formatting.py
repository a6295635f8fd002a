"""
Tests for brewlib result formatting and display configuration.
"""

import math

import pytest
from brewlib.config import DEFAULT_FORMAT, DisplayFormat, get_config
from brewlib.exceptions import ConfigurationError
from brewlib.formatting import (
    format_fixed,
    format_gravity,
    format_abv,
    format_hops,
    format_temperature,
)


class TestFormatting:
    """Tests for fixed decimal formatting."""

    def test_gravity(self):
        assert format_gravity(1.05) == "1.050"

    def test_abv(self):
        assert format_abv(5.339412) == "5.34"

    def test_hops(self):
        assert format_hops(0.5) == "0.50"

    def test_temperature(self):
        assert format_temperature(68) == "68.0"

    def test_no_thousands_separator(self):
        assert format_abv(12345.678) == "12345.68"

    def test_no_scientific_notation(self):
        assert format_gravity(1e-7) == "0.000"
        assert format_temperature(1e20) == "100000000000000000000.0"

    def test_half_even_on_exact_value(self):
        # 0.125 is exact in binary
        assert format_fixed(0.125, 2) == "0.12"
        assert format_fixed(0.375, 2) == "0.38"

    def test_negative(self):
        assert format_abv(-1.234) == "-1.23"

    def test_nan(self):
        assert format_abv(math.nan) == "nan"

    def test_custom_format(self):
        fmt = DisplayFormat(gravity_places=4, abv_places=1)
        assert format_gravity(1.05, fmt) == "1.0500"
        assert format_abv(5.25, fmt) == "5.2"

    def test_zero_places(self):
        fmt = DisplayFormat(temperature_places=0)
        assert format_temperature(67.8, fmt) == "68"


class TestDisplayFormat:
    """Tests for DisplayFormat model."""

    def test_defaults(self):
        assert DEFAULT_FORMAT.gravity_places == 3
        assert DEFAULT_FORMAT.abv_places == 2
        assert DEFAULT_FORMAT.hops_places == 2
        assert DEFAULT_FORMAT.temperature_places == 1

    def test_immutable(self):
        with pytest.raises(Exception):  # Pydantic ValidationError
            DEFAULT_FORMAT.gravity_places = 5

    def test_negative_places_rejected(self):
        with pytest.raises(Exception):  # Pydantic ValidationError
            DisplayFormat(abv_places=-1)


class TestGetConfig:
    """Tests for loading display configuration from the environment."""

    @pytest.fixture(autouse=True)
    def clear_environment(self, monkeypatch):
        for variable in (
            "BREWLIB_GRAVITY_PLACES",
            "BREWLIB_ABV_PLACES",
            "BREWLIB_HOPS_PLACES",
            "BREWLIB_TEMPERATURE_PLACES",
        ):
            monkeypatch.delenv(variable, raising=False)

    def test_defaults(self):
        assert get_config() == DEFAULT_FORMAT

    def test_override(self, monkeypatch):
        monkeypatch.setenv("BREWLIB_ABV_PLACES", "1")
        monkeypatch.setenv("BREWLIB_TEMPERATURE_PLACES", " 2 ")
        config = get_config()
        assert config.abv_places == 1
        assert config.temperature_places == 2
        assert config.gravity_places == 3

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("BREWLIB_HOPS_PLACES", "")
        assert get_config().hops_places == 2

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("BREWLIB_GRAVITY_PLACES", "three")
        with pytest.raises(ConfigurationError, match="BREWLIB_GRAVITY_PLACES"):
            get_config()

    def test_negative_value(self, monkeypatch):
        monkeypatch.setenv("BREWLIB_HOPS_PLACES", "-2")
        with pytest.raises(ConfigurationError, match="BREWLIB_HOPS_PLACES"):
            get_config()
