"""Typed failures raised while deriving a seed.

Frame errors come from the condenser; acquisition errors come from whatever
supplied the frame and are passed through to the caller untouched.
"""

from __future__ import annotations


class PhotoSeedError(Exception):
    """Base class for every error raised by photoseed."""


class FrameError(PhotoSeedError):
    """A frame could not be turned into canonical bytes."""


class MalformedFrame(FrameError, ValueError):
    """Buffer length disagrees with the frame's dimensions and format."""


class UnsupportedFormat(FrameError, ValueError):
    """The pixel format has no canonical serialization."""


class AcquisitionError(PhotoSeedError):
    """A frame could not be obtained from its source."""


class DeviceUnavailable(AcquisitionError):
    """No capture device is present or it cannot be opened."""


class CapturePermissionDenied(AcquisitionError, PermissionError):
    """The operating environment refused access to the device."""


class CaptureTimeout(AcquisitionError, TimeoutError):
    """No frame arrived within the allowed wait."""
