# src/cavetown/rng.py
# MT19937 seeded like C++ std::mt19937, plus the two libstdc++ distributions
# the original cave generator draws from. Same seed -> same cave, bit for bit.

import random
import struct

N = 624
MASK32 = 0xFFFFFFFF
TWO_32 = float(1 << 32)
INIT_MULT = 1812433253
MT_DEFAULT_SEED = 5489  # std::mt19937::default_seed

# Largest float32 strictly below 1.0 (nextafter(1.0f, 0.0f)).
BELOW_ONE_F32 = 1.0 - 2.0 ** -24


def mt_init_state(seed: int) -> list:
    """Knuth-style single-word seeding (init_genrand), as std::mt19937(seed)."""
    mt = [0] * N
    mt[0] = seed & MASK32
    for i in range(1, N):
        prev = mt[i - 1]
        mt[i] = (INIT_MULT * (prev ^ (prev >> 30)) + i) & MASK32
    return mt


def to_float32(v: float) -> float:
    """Round a Python float to the nearest IEEE single, returned as a float."""
    return struct.unpack("<f", struct.pack("<f", v))[0]


class CaveRandom:
    """
    Deterministic random source for one generation run.

    Python's Mersenne Twister is the same engine as std::mt19937, only seeded
    differently (init_by_array), so we build the 624-word state ourselves and
    hand it over with setstate(). getrandbits(32) then yields exactly the
    sequence of mt19937::operator().
    """

    def __init__(self, seed: int = MT_DEFAULT_SEED):
        self.seed = seed & MASK32
        self._mt = random.Random()
        self._mt.setstate((3, tuple(mt_init_state(self.seed)) + (N,), None))

    def next32(self) -> int:
        return self._mt.getrandbits(32)

    def uniform01(self) -> float:
        """
        uniform_real_distribution<float>(0, 1): one 32-bit draw, converted to
        float32, scaled by 2^-32 (generate_canonical<float, 24>). Rounding can
        land on 1.0, which libstdc++ pulls back to the largest float below 1.
        """
        ret = to_float32(float(self.next32())) / TWO_32
        if ret >= 1.0:
            ret = BELOW_ONE_F32
        return ret

    def uniform_int(self, lo: int, hi: int) -> int:
        """
        uniform_int_distribution<int>(lo, hi), closed range.
        libstdc++ (GCC 11+) uses Lemire's multiply-and-reject for 32-bit engines.
        """
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        span = hi - lo + 1
        if span > MASK32:
            raise ValueError("range wider than the engine output")
        product = self.next32() * span
        low = product & MASK32
        if low < span:
            threshold = ((1 << 32) - span) % span
            while low < threshold:
                product = self.next32() * span
                low = product & MASK32
        return lo + (product >> 32)
