from typing import Final, Protocol

INITIAL_CAPACITY: Final[int] = 256


class GrowthPolicy(Protocol):
    def next_capacity(self, current: int, required: int) -> int: ...


class PowerOfTwoGrowth(GrowthPolicy):
    """
    Smallest power of two that is at least `minimum` and `required`.
    """

    _minimum: int

    def __init__(self, minimum: int = INITIAL_CAPACITY):
        if minimum <= 0:
            raise ValueError(f"Minimum capacity must be positive, got {minimum}")
        self._minimum = minimum

    def next_capacity(self, current: int, required: int) -> int:
        size = self._minimum
        while required > size:
            size <<= 1
        return size


class LinearGrowth(GrowthPolicy):
    """
    Smallest multiple of `step` that is at least `required`.
    """

    _step: int

    def __init__(self, step: int = INITIAL_CAPACITY):
        if step <= 0:
            raise ValueError(f"Growth step must be positive, got {step}")
        self._step = step

    def next_capacity(self, current: int, required: int) -> int:
        return max(-(-required // self._step), 1) * self._step
