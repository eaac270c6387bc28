# core/rng.py
from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Named numpy Generator streams derived from [master_seed, session, stream].
    Streams used by the app: "adjacency" (graph generation), "selection"
    (random default current location).
    """

    def __init__(self, master_seed: int, *, session: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.session_tag = _crc32_u32(str(session))

    @cache
    def stream(self, name: str) -> np.random.Generator:
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.session_tag, _crc32_u32(name)]
        )
        return np.random.Generator(np.random.PCG64(ss))
