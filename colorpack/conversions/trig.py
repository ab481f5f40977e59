"""
Sine and cosine measured in turns.

One turn is a full rotation, so ``sin_turns(0.25) == 1``. Values come from a
table of TRIG_TABLE_SIZE samples per turn with linear interpolation between
neighbours; the error against ``math.sin(2 * pi * x)`` stays below 1e-6.
Quarter turns land exactly on table entries, so 0, 0.25, 0.5 and 0.75 give
exact results.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Union

from ..constants import TRIG_TABLE_SIZE, TRIG_TABLE_MASK

# one extra sample so interpolation never has to wrap the upper neighbour
SIN_TABLE: NDArray = np.sin(np.arange(TRIG_TABLE_SIZE + 1, dtype=np.float64) * (2.0 * np.pi / TRIG_TABLE_SIZE))
SIN_TABLE[0] = SIN_TABLE[TRIG_TABLE_SIZE] = 0.0
SIN_TABLE[TRIG_TABLE_SIZE // 2] = 0.0
SIN_TABLE[TRIG_TABLE_SIZE // 4] = 1.0
SIN_TABLE[3 * TRIG_TABLE_SIZE // 4] = -1.0
SIN_TABLE.setflags(write=False)


def np_sin_turns(x) -> NDArray:
    """Vectorized: sine of x turns."""
    scaled = np.asarray(x, dtype=np.float64) * TRIG_TABLE_SIZE
    floor = np.floor(scaled)
    frac = scaled - floor
    index = floor.astype(np.int64) & TRIG_TABLE_MASK
    low = SIN_TABLE[index]
    return low + frac * (SIN_TABLE[index + 1] - low)


def np_cos_turns(x) -> NDArray:
    """Vectorized: cosine of x turns."""
    return np_sin_turns(np.asarray(x, dtype=np.float64) + 0.25)


def sin_turns(x: Union[float, NDArray]) -> Union[float, NDArray]:
    """
    Sine of an angle given in turns.

    Args:
        x: Angle in turns, any real value. Arrays are handled element-wise.

    Returns:
        float for scalar input, ndarray otherwise
    """
    if isinstance(x, np.ndarray):
        return np_sin_turns(x)
    return float(np_sin_turns(x))


def cos_turns(x: Union[float, NDArray]) -> Union[float, NDArray]:
    """Cosine of an angle given in turns, ``sin_turns(x + 0.25)``."""
    if isinstance(x, np.ndarray):
        return np_cos_turns(x)
    return float(np_cos_turns(x))
