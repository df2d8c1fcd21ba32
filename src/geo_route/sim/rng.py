# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Named numpy generators derived from one session seed.
    Each stream is seeded from [seed, session tag, crc(name)], so the draws of
    one stream do not depend on which other streams were used first.
    """

    def __init__(self, seed: int, *, session: str | int = 0):
        self.seed = _u32(seed)
        self.session_tag = _tag(str(session))

    @cache
    def stream(self, name: str) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.seed, self.session_tag, _tag(name)])
        return np.random.Generator(np.random.PCG64(ss))
