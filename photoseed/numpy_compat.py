"""NumPy random generators keyed by a derived seed.

Usage::

    from photoseed import derive_seed
    from photoseed.numpy_compat import generator_from_seed

    rng = generator_from_seed(derive_seed(frame))
    rng.integers(0, 10, size=10)
"""

from __future__ import annotations

import numpy as np


def seed_to_int(seed: bytes) -> int:
    """Seed bytes as a little-endian unsigned integer."""
    return int.from_bytes(bytes(seed), "little")


def seed_number(seed: bytes) -> int:
    """Sum of the seed's bytes, a short human-readable fingerprint."""
    return int(np.frombuffer(bytes(seed), dtype=np.uint8).sum(dtype=np.int64))


def generator_from_seed(seed: bytes) -> np.random.Generator:
    """``numpy.random.Generator`` (PCG64) keyed by the full seed.

    ``SeedSequence`` absorbs all 256 bits, so two seeds differing in any
    bit give unrelated streams.  Identical seeds give identical streams.
    """
    return np.random.Generator(np.random.PCG64(np.random.SeedSequence(seed_to_int(seed))))


def sample(seed: bytes, count: int = 10) -> dict:
    """Demonstration draws: digits in [0, 10) and fair coin flips."""
    rng = generator_from_seed(seed)
    return {
        "numbers": [int(v) for v in rng.integers(0, 10, size=count)],
        "bools": [bool(v) for v in rng.random(count) < 0.5],
    }
