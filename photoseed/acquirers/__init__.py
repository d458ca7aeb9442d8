"""Frame acquirer implementations."""

from photoseed.acquirers.base import FrameAcquirer
from photoseed.acquirers.camera import CameraAcquirer
from photoseed.acquirers.image_file import ImageFileAcquirer, save_frame

# Live acquirers probed by ``detect_available_acquirers``.  File-backed
# acquirers need a path and are constructed by the caller.
ALL_ACQUIRERS: list[type[FrameAcquirer]] = [
    CameraAcquirer,
]

__all__ = [
    "ALL_ACQUIRERS",
    "CameraAcquirer",
    "FrameAcquirer",
    "ImageFileAcquirer",
    "save_frame",
]
