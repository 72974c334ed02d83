"""Float arithmetic that follows IEEE-754 instead of raising"""

import math


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE-754 doubles: x/0 is +/-inf, 0/0 is NaN"""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # Signed zero in the denominator flips the sign of the infinity
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def compound_growth(rate: float, periods: int) -> float:
    """(1 + rate) ** periods, saturating to +/-inf on overflow"""
    base = 1 + rate
    try:
        return math.pow(base, periods)
    except OverflowError:
        return -math.inf if base < 0 and periods % 2 else math.inf
    except ValueError:
        # 0 raised to a negative power
        return math.inf
