import math

from boundednumbers import RealNumber, clamp01


def nan_safe_clamp01(value: RealNumber) -> float:
    """clamp01 that sends NaN to 0 instead of passing it through."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return float(clamp01(value))
