"""
Hop calculations.
"""

from brewlib.formatting import format_hops
from brewlib.parsing import parse_floats


def aau_to_ounces_aa(aau: float | int | str, aa: float | int | str) -> float:
    """
    Convert a hop measurement in Alpha Acid Units to ounces of hops.

    ounces = AAU / AA%

    Args:
        aau: Hop AAU measurement
        aa: Alpha acid percentage of the hops being used

    Returns:
        Ounces of hops, or 0.0 when the alpha acid percentage is not positive

    Raises:
        InvalidArgumentError: If a text argument cannot be read as a number
    """
    _aau, _aa = parse_floats((aau, "AAU value"), (aa, "AA value"))
    if _aa > 0:
        return _aau / _aa
    return 0.0


# Presentation
format_value = format_hops
