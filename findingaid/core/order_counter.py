"""
Order Counter Component.

Hands out the global pre-order index of a single conversion run.
"""


class OrderCounter:
    """
    Monotonically increasing counter scoped to one conversion.

    A new instance is created for every run; instances are never shared
    between conversions.
    """

    def __init__(self):
        self._value = 0

    def next(self) -> int:
        """Allocate the next order value, starting at 1."""
        self._value += 1
        return self._value

    @property
    def value(self) -> int:
        """Last allocated order value (0 before the first allocation)."""
        return self._value

    def __repr__(self):
        return f"<OrderCounter(value={self._value})>"
