# sim/rng.py
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Named stream; the name is folded into the seed entropy."""

    stream: str

    @property
    def entropy(self) -> int:
        return _crc32_u32(self.stream)


class RNGRegistry:
    """
    The single randomness provider of a generation run.
    Every named stream is derived from [master_seed, crc32(name)], so the
    draws of one record kind do not depend on how many records of another
    kind were generated first.
    """

    def __init__(self, master_seed: int):
        self.master_seed = int(master_seed)
        self._entropy = [_u32(self.master_seed), _u32(self.master_seed >> 32)]

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[*self._entropy, key.entropy])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey(name))


# ---------------- numeric utilities ----------------


def uniform_int(rng: np.random.Generator, lo: int, hi: int) -> int:
    """Uniform integer in the inclusive range [lo, hi]."""
    return int(rng.integers(lo, hi, endpoint=True))


def uniform_float(rng: np.random.Generator, lo: float, hi: float) -> float:
    """Uniform float in the half-open range [lo, hi)."""
    return float(rng.uniform(lo, hi))


def round1(x: float) -> float:
    """Round to one decimal, halves away from zero (built-in round() is half-to-even)."""
    scaled = math.floor(abs(x) * 10.0 + 0.5) / 10.0
    return math.copysign(scaled, x) if scaled else 0.0
