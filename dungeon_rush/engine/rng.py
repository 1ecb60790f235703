"""
Dungeon Rush - Seeded Random Number Generator

Park-Miller style linear congruential generator. Every shuffle of the tile
supply goes through one of these, so a game's tile order is fully determined
by its seed.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


class SeededRandom:
    """Reproducible LCG over the prime modulus 2**31 - 1."""

    MODULUS = 2147483647
    MULTIPLIER = 16807

    def __init__(self, seed: int) -> None:
        self.state = self._normalize(seed)

    @classmethod
    def _normalize(cls, seed: int) -> int:
        state = seed % cls.MODULUS
        if state <= 0:
            state += cls.MODULUS - 1
        return state

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self.state = (self.state * self.MULTIPLIER) % self.MODULUS
        return (self.state - 1) / (self.MODULUS - 1)

    def next_int(self, low: int, high: int) -> int:
        """Random integer between low and high (inclusive)."""
        return int(self.next() * (high - low + 1)) + low

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """
        Fisher-Yates shuffle.

        Args:
            items: Sequence to shuffle (left untouched)

        Returns:
            New shuffled list
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence.")
        return items[self.next_int(0, len(items) - 1)]

    def reset(self, seed: int) -> None:
        """Restore the generator to the state it had when built with seed."""
        self.state = self._normalize(seed)
