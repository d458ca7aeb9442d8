"""Entropy conditioning: frame → canonical bytes → seed.

Every function here is pure.  Nothing is cached between calls and no
clock, randomness or device state is consulted, so the same pixels always
give the same seed.
"""

from __future__ import annotations

import hashlib
import logging

from photoseed.frame import RawFrame

logger = logging.getLogger(__name__)

HASH_NAME = "sha256"
SEED_SIZE = hashlib.new(HASH_NAME).digest_size  # 32 bytes


def serialize(frame: RawFrame) -> bytes:
    """Canonical byte sequence for *frame*'s pixel content.

    Row-major over pixels, channels in the order the format declares,
    one byte per channel, no padding.  Metadata is never included.
    Raises ``UnsupportedFormat`` or ``MalformedFrame``.
    """
    return frame.to_array().tobytes(order="C")


def condense(data: bytes | bytearray | memoryview) -> bytes:
    """Single SHA-256 pass over *data*; always ``SEED_SIZE`` bytes."""
    return hashlib.new(HASH_NAME, data).digest()


def derive_seed(frame: RawFrame) -> bytes:
    """Derive a ``SEED_SIZE``-byte seed from one frame.

    Example::

        frame = RawFrame(2, 2, PixelFormat.RGB8, pixels)
        seed = derive_seed(frame)
        rng = numpy.random.Generator(numpy.random.PCG64(int.from_bytes(seed, "little")))

    A zero-area frame yields the digest of empty input; reject such frames
    upstream if a fixed seed is unacceptable.
    """
    canonical = serialize(frame)
    logger.debug(
        "condensing %dx%d %s frame (%d bytes)",
        frame.width,
        frame.height,
        frame.format,
        len(canonical),
    )
    return condense(canonical)
