"""
photoseed: a PRNG seed from a single camera frame.

Captures one still image, serializes its pixels in a fixed canonical order
and condenses them with SHA-256 into a 32-byte seed.
"""

__version__ = "0.1.0"

from photoseed.conditioning import SEED_SIZE, condense, derive_seed, serialize
from photoseed.errors import (
    AcquisitionError,
    CapturePermissionDenied,
    CaptureTimeout,
    DeviceUnavailable,
    FrameError,
    MalformedFrame,
    PhotoSeedError,
    UnsupportedFormat,
)
from photoseed.frame import PixelFormat, RawFrame, bytes_per_pixel

__all__ = [
    "AcquisitionError",
    "CapturePermissionDenied",
    "CaptureTimeout",
    "DeviceUnavailable",
    "FrameError",
    "MalformedFrame",
    "PhotoSeedError",
    "PixelFormat",
    "RawFrame",
    "SEED_SIZE",
    "UnsupportedFormat",
    "__version__",
    "bytes_per_pixel",
    "condense",
    "derive_seed",
    "serialize",
    "seed_from_camera",
]


def seed_from_camera(**kwargs) -> bytes:
    """Capture one frame and derive its seed.

    Keyword arguments go to ``CameraAcquirer``.  Acquisition errors are
    raised unchanged; retrying is up to the caller.
    """
    from photoseed.acquirers.camera import CameraAcquirer

    with CameraAcquirer(**kwargs) as camera:
        return derive_seed(camera.acquire_frame())
