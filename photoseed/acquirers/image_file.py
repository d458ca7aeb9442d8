"""Stored-image acquirer and PNG writer (requires Pillow).

A frame saved with ``save_frame`` and read back through
``ImageFileAcquirer`` carries identical pixels, so it derives the same
seed.  That is how a seed is reproduced later from the captured image.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np

from photoseed.acquirers.base import FrameAcquirer
from photoseed.errors import CapturePermissionDenied, DeviceUnavailable, MalformedFrame
from photoseed.frame import PixelFormat, RawFrame

logger = logging.getLogger(__name__)

_MODES = {"RGB": PixelFormat.RGB8, "RGBA": PixelFormat.RGBA8}


class ImageFileAcquirer(FrameAcquirer):
    """Read one frame back from a lossless image file."""

    name = "image_file"
    description = "Previously captured frame stored as PNG"
    platform_requirements = ["Pillow"]

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def is_available(self) -> bool:
        try:
            import PIL  # noqa: F401
        except ImportError:
            return False
        return self.path.is_file()

    def acquire_frame(self) -> RawFrame:
        from PIL import Image, UnidentifiedImageError

        try:
            with Image.open(self.path) as img:
                img.load()
                if img.mode not in _MODES:
                    img = img.convert("RGBA")
                fmt = _MODES[img.mode]
                array = np.asarray(img, dtype=np.uint8)
            mtime = self.path.stat().st_mtime
        except FileNotFoundError:
            logger.warning("image not found: %s", self.path)
            raise DeviceUnavailable(f"image not found: {self.path}") from None
        except PermissionError:
            logger.warning("permission denied reading %s", self.path)
            raise CapturePermissionDenied(f"permission denied reading {self.path}") from None
        except (UnidentifiedImageError, OSError) as e:
            logger.warning("cannot decode %s: %s", self.path, e)
            raise MalformedFrame(f"cannot decode {self.path}: {e}") from e

        frame = RawFrame.from_array(
            array,
            fmt,
            timestamp=mtime,
            device=f"file:{self.path}",
        )
        logger.debug("loaded %dx%d %s from %s", frame.width, frame.height, fmt.value, self.path)
        return frame


def save_frame(frame: RawFrame, path: str | os.PathLike) -> Path:
    """Write *frame* losslessly as PNG and return the path written."""
    from PIL import Image

    array = frame.to_array()
    if array.size == 0:
        raise MalformedFrame("cannot store an empty frame as PNG")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(array)).save(path, format="PNG")
    logger.debug("saved %dx%d frame to %s", frame.width, frame.height, path)
    return path
