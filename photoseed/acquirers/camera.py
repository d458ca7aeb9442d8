"""Camera frame acquirer (requires opencv-python)."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time

import numpy as np

from photoseed.acquirers.base import FrameAcquirer
from photoseed.config import get_settings
from photoseed.errors import (
    CapturePermissionDenied,
    CaptureTimeout,
    DeviceUnavailable,
    MalformedFrame,
)
from photoseed.frame import PixelFormat, RawFrame

logger = logging.getLogger(__name__)


class CameraAcquirer(FrameAcquirer):
    """One still frame from a camera via ``cv2.VideoCapture``.

    Sensor shot noise and ambient light make the exact pixel values hard to
    predict in advance, even for a static scene.  OpenCV delivers BGR(A);
    frames are converted to RGB8/RGBA8 so the canonical channel order holds.

    Requires ``opencv-python`` optional dependency and a camera.
    """

    name = "camera"
    description = "Single still frame from an OpenCV camera device"
    platform_requirements = ["opencv-python", "camera"]

    def __init__(
        self,
        device_index: int | None = None,
        timeout: float | None = None,
        warmup_frames: int | None = None,
    ) -> None:
        settings = get_settings()
        self.device_index = settings.device_index if device_index is None else device_index
        self.timeout = settings.capture_timeout if timeout is None else timeout
        self.warmup_frames = settings.warmup_frames if warmup_frames is None else warmup_frames

    @property
    def device(self) -> str:
        return f"camera:{self.device_index}"

    def is_available(self) -> bool:
        try:
            import cv2

            cap = cv2.VideoCapture(self.device_index)
            ok = cap.isOpened()
            cap.release()
            return bool(ok)
        except Exception:
            return False

    def acquire_frame(self) -> RawFrame:
        cap = self._open()

        # cap.read() can hang on some drivers; the reader owns the capture
        # and releases it even if we stop waiting.
        result: dict = {}

        def _reader() -> None:
            try:
                for _ in range(self.warmup_frames):
                    cap.read()
                result["read"] = cap.read()
            except Exception as e:
                result["error"] = e
            finally:
                cap.release()

        t = threading.Thread(target=_reader, name=f"photoseed-{self.device}", daemon=True)
        t.start()
        t.join(timeout=self.timeout)

        if t.is_alive():
            logger.warning("%s: no frame within %.1fs", self.device, self.timeout)
            raise CaptureTimeout(f"{self.device}: no frame within {self.timeout:.1f}s")
        if "error" in result:
            logger.warning("%s: read failed: %s", self.device, result["error"])
            raise DeviceUnavailable(f"{self.device}: read failed: {result['error']}") from result["error"]

        ok, image = result["read"]
        if not ok or image is None:
            logger.warning("%s: device returned no frame", self.device)
            raise DeviceUnavailable(f"{self.device}: device returned no frame")

        frame = self._to_frame(image)
        frame.validate()
        return frame

    # ── helpers ──

    def _open(self):
        try:
            import cv2
        except ImportError:
            raise DeviceUnavailable(
                "opencv-python is not installed; pip install photoseed[camera]"
            ) from None

        node = self._device_node()
        if node and os.path.exists(node) and not os.access(node, os.R_OK):
            logger.warning("%s: permission denied on %s", self.device, node)
            raise CapturePermissionDenied(f"{self.device}: permission denied on {node}")

        cap = cv2.VideoCapture(self.device_index)
        if not cap.isOpened():
            cap.release()
            logger.warning("%s: unable to open device", self.device)
            raise DeviceUnavailable(f"{self.device}: unable to open device")
        return cap

    def _device_node(self) -> str | None:
        """V4L2 node backing the index, on Linux only."""
        if sys.platform.startswith("linux"):
            return f"/dev/video{self.device_index}"
        return None

    def _to_frame(self, image: np.ndarray) -> RawFrame:
        import cv2

        image = np.asarray(image)
        if image.dtype != np.uint8:
            raise MalformedFrame(f"{self.device}: expected 8-bit frame, got {image.dtype}")

        if image.ndim == 2:
            rgb, fmt = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB), PixelFormat.RGB8
        elif image.ndim == 3 and image.shape[2] == 3:
            rgb, fmt = cv2.cvtColor(image, cv2.COLOR_BGR2RGB), PixelFormat.RGB8
        elif image.ndim == 3 and image.shape[2] == 4:
            rgb, fmt = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA), PixelFormat.RGBA8
        else:
            raise MalformedFrame(f"{self.device}: unexpected frame shape {image.shape}")

        logger.debug("%s: captured %dx%d %s", self.device, rgb.shape[1], rgb.shape[0], fmt.value)
        return RawFrame.from_array(rgb, fmt, timestamp=time.time(), device=self.device)
