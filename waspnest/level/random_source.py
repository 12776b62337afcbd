"""
Injectable randomness for nest generation.

Anything providing ``random()`` and ``randrange(start, stop)`` can drive the
generator; ``random.Random`` does, so a seeded instance gives deterministic
replay.
"""

from typing import MutableSequence, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def randrange(self, start: int, stop: int) -> int:
        """Uniform int in [start, stop)."""
        ...


def uniform_between(rng: RandomSource, low: float, high: float) -> float:
    """Uniform float in [low, high) drawn from a single ``random()`` call."""
    return low + rng.random() * (high - low)


def shuffle(items: MutableSequence[T], rng: RandomSource) -> None:
    """Fisher-Yates shuffle in place using only the RandomSource calls."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(0, i + 1)
        items[i], items[j] = items[j], items[i]
