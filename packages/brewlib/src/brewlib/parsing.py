"""
Validation of numeric arguments supplied as text.

Every calculation accepts either a number or a string for each argument.
Strings are validated here with pydantic and any failure is reported as
an InvalidArgumentError naming the argument's role, so a caller can show
field-specific feedback.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from brewlib.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

_FLOAT = TypeAdapter(float)


def to_float(value: float | int | str, field: str) -> float:
    """
    Read a single argument as a float.

    Args:
        value: Number, or text encoding a number (e.g. "1.050")
        field: Semantic name of the argument, used in the error message

    Returns:
        The value as a float

    Raises:
        InvalidArgumentError: If text cannot be read as a number
    """
    if not isinstance(value, str):
        return float(value)

    try:
        return _FLOAT.validate_python(value)
    except ValidationError as e:
        logger.debug("Rejected %s: %r", field, value)
        raise InvalidArgumentError(field, value) from e


def parse_floats(*arguments: tuple[float | int | str, str]) -> list[float]:
    """
    Read several (value, field) arguments as floats, left to right.

    Stops at the first argument that fails, so the error always names
    the earliest bad field.

    Example:
        >>> parse_floats(("1.050", "original gravity value"), ("1.010", "final gravity value"))
        [1.05, 1.01]
    """
    return [to_float(value, field) for value, field in arguments]
