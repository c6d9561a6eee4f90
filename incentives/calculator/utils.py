# ==============================================================================
# incentives/calculator/utils.py
# ------------------------------------------------------------------------------
# Rounding helper shared by both calculators.
# ==============================================================================

import math
from fractions import Fraction


def floor_to_two_decimals(value):
    """
    Truncates a value to two decimal places: floor(value * 100) / 100.
    Example: 0.925 -> 0.92, 88.095 -> 88.09 (never rounded up).

    The result is an exact Fraction so that several truncation steps can be
    chained without picking up binary floating-point error. Pass a Fraction
    (or an int) for exact results; floats are taken at their binary value.

    This deliberately differs from flooring a float quotient: 29 / 25 / 4
    truncates to 0.29 here, where float arithmetic (29 / 25 / 4 * 100 =
    28.999...) would give 0.28. The two never differ by more than 0.01.
    """
    return Fraction(math.floor(Fraction(value) * 100), 100)
