"""Tests for NumPy generators keyed by a seed."""

import numpy as np

from photoseed.conditioning import derive_seed
from photoseed.numpy_compat import generator_from_seed, sample, seed_number, seed_to_int


def test_seed_to_int_little_endian():
    assert seed_to_int(b"\x01" + bytes(31)) == 1
    assert seed_to_int(bytes(31) + b"\x01") == 1 << 248


def test_seed_number():
    assert seed_number(b"\x01" * 32) == 32
    assert seed_number(b"\xff" * 32) == 255 * 32


def test_generator_reproducible(rgb_frame):
    seed = derive_seed(rgb_frame)
    a = generator_from_seed(seed).integers(0, 2**32, size=16)
    b = generator_from_seed(seed).integers(0, 2**32, size=16)
    np.testing.assert_array_equal(a, b)


def test_generator_uses_high_bits():
    low = bytes(32)
    high = bytes(31) + b"\x80"
    a = generator_from_seed(low).random(8)
    b = generator_from_seed(high).random(8)
    assert not np.array_equal(a, b)


def test_sample_shapes(rgb_frame):
    draws = sample(derive_seed(rgb_frame), count=10)
    assert len(draws["numbers"]) == 10
    assert all(0 <= n < 10 for n in draws["numbers"])
    assert len(draws["bools"]) == 10
    assert all(isinstance(b, bool) for b in draws["bools"])


def test_sample_zero():
    assert sample(bytes(32), count=0) == {"numbers": [], "bools": []}
