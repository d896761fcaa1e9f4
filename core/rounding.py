"""Half-up rounding used for every reported figure.

Python's built-in `round` rounds halves to even (`round(2.5) == 2`); results
here round halves up, so 1673.75 kcal is reported as 1674.
"""

import math


def round_half_up(value: float, ndigits: int = 0):
    """Round `value` to `ndigits` decimals, halves toward positive infinity.

    Returns an int when `ndigits` is 0, a float otherwise.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5)
    if ndigits == 0:
        return int(rounded)
    return rounded / factor


def round_1(value: float) -> float:
    """Round to one decimal place."""
    return round_half_up(value, 1)
