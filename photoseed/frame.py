"""Raw frame data model.

A ``RawFrame`` is one captured image: pixel bytes plus the dimensions and
format needed to read them.  Capture metadata (timestamp, device) rides
along for callers but never takes part in equality or serialization.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from photoseed.errors import MalformedFrame, UnsupportedFormat


class PixelFormat(str, enum.Enum):
    """Pixel layouts a frame may declare."""

    RGB8 = "RGB8"
    RGBA8 = "RGBA8"
    YUV = "YUV"  # packed YUYV 4:2:2


# Formats with a canonical channel order, one byte per channel.
_BYTES_PER_PIXEL: dict[PixelFormat, int] = {
    PixelFormat.RGB8: 3,
    PixelFormat.RGBA8: 4,
}


def pixel_format(fmt: PixelFormat | str) -> PixelFormat:
    """Coerce *fmt* to a ``PixelFormat`` or raise ``UnsupportedFormat``."""
    try:
        return PixelFormat(fmt)
    except ValueError:
        raise UnsupportedFormat(f"unknown pixel format: {fmt!r}") from None


def bytes_per_pixel(fmt: PixelFormat | str) -> int:
    """Bytes per pixel for a supported format."""
    fmt = pixel_format(fmt)
    try:
        return _BYTES_PER_PIXEL[fmt]
    except KeyError:
        raise UnsupportedFormat(f"pixel format {fmt.value} is not supported") from None


def supported_formats() -> list[PixelFormat]:
    return list(_BYTES_PER_PIXEL)


@dataclass(frozen=True)
class RawFrame:
    """Pixel buffer plus the metadata needed to interpret it.

    Parameters
    ----------
    width, height:
        Frame dimensions in pixels.
    format:
        Declared ``PixelFormat`` (a matching string is accepted too).
    pixels:
        Bytes-like buffer or uint8 ndarray, row-major, channels in
        format order.  Arrays are flattened to bytes on construction.
    timestamp, device:
        Incidental capture metadata. Ignored by ``==`` and by
        serialization.
    """

    width: int
    height: int
    format: PixelFormat | str
    pixels: Any = field(repr=False)
    timestamp: float | None = field(default=None, compare=False)
    device: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.pixels, np.ndarray):
            if self.pixels.dtype != np.uint8:
                raise MalformedFrame(f"expected uint8 pixels, got {self.pixels.dtype}")
            object.__setattr__(self, "pixels", np.ascontiguousarray(self.pixels).tobytes())

    @classmethod
    def from_array(
        cls,
        array: np.ndarray,
        fmt: PixelFormat | str = PixelFormat.RGB8,
        **metadata: Any,
    ) -> RawFrame:
        """Build a frame from an ``H x W x C`` uint8 array."""
        array = np.asarray(array)
        if array.dtype != np.uint8:
            raise MalformedFrame(f"expected uint8 pixels, got {array.dtype}")
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        if array.ndim != 3:
            raise MalformedFrame(f"expected an H x W x C array, got shape {array.shape}")
        height, width, channels = array.shape
        bpp = bytes_per_pixel(fmt)
        if channels != bpp:
            raise MalformedFrame(
                f"{pixel_format(fmt).value} needs {bpp} channels, array has {channels}"
            )
        return cls(
            width=width,
            height=height,
            format=pixel_format(fmt),
            pixels=np.ascontiguousarray(array).tobytes(),
            **metadata,
        )

    @property
    def bytes_per_pixel(self) -> int:
        return bytes_per_pixel(self.format)

    @property
    def expected_size(self) -> int:
        return self.width * self.height * self.bytes_per_pixel

    def validate(self) -> None:
        """Raise if the buffer cannot be read with the declared layout."""
        bpp = self.bytes_per_pixel
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise MalformedFrame(f"{label} must be a non-negative integer, got {value!r}")
        actual = _buffer_size(self.pixels)
        expected = self.width * self.height * bpp
        if actual != expected:
            raise MalformedFrame(
                f"{self.width}x{self.height} {pixel_format(self.format).value} frame "
                f"needs {expected} bytes, buffer has {actual}"
            )

    def to_array(self) -> np.ndarray:
        """Validated ``H x W x C`` uint8 view of the pixels."""
        self.validate()
        shape = (self.height, self.width, self.bytes_per_pixel)
        if self.width * self.height == 0:
            return np.zeros(shape, dtype=np.uint8)
        view = memoryview(self.pixels)
        if not view.c_contiguous:
            view = memoryview(view.tobytes())
        return np.frombuffer(view, dtype=np.uint8).reshape(shape)


def _buffer_size(pixels: Any) -> int:
    try:
        return memoryview(pixels).nbytes
    except TypeError:
        raise MalformedFrame(
            f"pixel buffer must be bytes-like, got {type(pixels).__name__}"
        ) from None
