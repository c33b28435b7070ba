"""Random sources consumed by the wall placer.

The placer only ever calls ``next()`` and reduces the result modulo a small
range, so any object with that method works. Two implementations ship:

    * ``PcgSource``: PCG32 (XSH RR) seeded from a 64-bit value. Reproducible.
    * ``EntropySource``: backed by the operating system entropy pool. Not reproducible.

``BUILD_STAMP`` is captured once at import time and plays the role of a fixed
build timestamp: the default seed for a process that was not given one.
"""

from __future__ import annotations

import random
import time

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
PCG_MULTIPLIER = 6364136223846793005
DISCARD_STEPS = 30

BUILD_STAMP = time.strftime("%H:%M:%S")


def seed_from_stamp(stamp: str) -> int:
    """Fold the ASCII bytes of ``stamp`` into a 64-bit seed (shift left 8, or in byte)."""
    shifted = 0
    for byte in stamp.encode("ascii"):
        shifted = ((shifted << 8) | byte) & MASK64
    return shifted


class RandomSource:
    """Supplies unsigned 32-bit values on demand."""

    def next(self) -> int:
        raise NotImplementedError


class PcgSource(RandomSource):
    def __init__(self, seed: int, discard: int = DISCARD_STEPS):
        self.seed = seed & MASK64
        self.state = 0
        self.inc = self.seed
        # early outputs of a zero-state PCG are poor
        for _ in range(discard):
            self.next()

    @classmethod
    def from_stamp(cls, stamp: str = BUILD_STAMP, discard: int = DISCARD_STEPS) -> "PcgSource":
        return cls(seed_from_stamp(stamp), discard=discard)

    def next(self) -> int:
        old = self.state
        self.state = (old * PCG_MULTIPLIER + (self.inc | 1)) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    def __repr__(self) -> str:
        return f"PcgSource(seed={self.seed})"


class EntropySource(RandomSource):
    def __init__(self):
        self._sysrand = random.SystemRandom()

    def next(self) -> int:
        return self._sysrand.getrandbits(32)

    def __repr__(self) -> str:
        return "EntropySource()"


def make_source(seed: int | None = None, *, stamp: str | None = None, entropy: bool = False) -> RandomSource:
    """Pick a source: entropy wins, then an explicit seed, then a stamp (default ``BUILD_STAMP``)."""
    if entropy:
        return EntropySource()
    if seed is not None:
        return PcgSource(seed)
    return PcgSource.from_stamp(stamp or BUILD_STAMP)


__all__ = [
    "BUILD_STAMP",
    "RandomSource",
    "PcgSource",
    "EntropySource",
    "make_source",
    "seed_from_stamp",
]
