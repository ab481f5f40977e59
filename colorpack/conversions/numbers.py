from boundednumbers import RealNumber
from boundednumbers.functions import cyclic_wrap_float


class Turns(float):
    """An angle in turns, wrapped into ``[0, 1)``."""

    def __new__(cls, value: RealNumber):
        return super().__new__(cls, wrap_turns(value))

    def __repr__(self):
        return f"Turns({float(self)})"


def wrap_turns(value: RealNumber) -> float:
    """Wrap an angle in turns into ``[0, 1)``; -0.25 becomes 0.75."""
    wrapped = float(cyclic_wrap_float(float(value), 0.0, 1.0))
    # float modulo can round up to exactly 1.0 for tiny negative inputs
    return 0.0 if wrapped >= 1.0 else wrapped
