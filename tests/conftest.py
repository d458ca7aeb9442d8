"""Shared fixtures: synthetic frames and a stand-in ``cv2`` module."""

import sys
import threading
import types

import numpy as np
import pytest

from photoseed.config import get_settings
from photoseed.frame import PixelFormat, RawFrame

# Red, green, blue, white.
RGB_2X2 = bytes([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rgb_frame():
    return RawFrame(2, 2, PixelFormat.RGB8, RGB_2X2)


@pytest.fixture
def noisy_frame():
    rng = np.random.default_rng(1234)
    return RawFrame.from_array(rng.integers(0, 256, (24, 32, 3), dtype=np.uint8))


class FakeCapture:
    def __init__(self, frames, opened=True, gate=None):
        self.frames = list(frames)
        self.opened = opened
        self.gate = gate
        self.reads = 0
        self.released = False

    def isOpened(self):
        return self.opened

    def read(self):
        if self.gate is not None:
            self.gate.wait()
        self.reads += 1
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


def make_fake_cv2(capture):
    cv2 = types.ModuleType("cv2")
    cv2.COLOR_BGR2RGB = 4
    cv2.COLOR_BGRA2RGBA = 5
    cv2.COLOR_GRAY2RGB = 8
    cv2.opened_indices = []

    def VideoCapture(index):
        cv2.opened_indices.append(index)
        return capture

    def cvtColor(image, code):
        if code == cv2.COLOR_GRAY2RGB:
            return np.repeat(image[:, :, np.newaxis], 3, axis=2)
        if code == cv2.COLOR_BGR2RGB:
            return image[:, :, ::-1].copy()
        if code == cv2.COLOR_BGRA2RGBA:
            return image[:, :, [2, 1, 0, 3]].copy()
        raise AssertionError(f"unexpected conversion {code}")

    cv2.VideoCapture = VideoCapture
    cv2.cvtColor = cvtColor
    return cv2


@pytest.fixture
def fake_camera(monkeypatch):
    """Install a fake ``cv2`` serving the given BGR frames."""
    from photoseed.acquirers.camera import CameraAcquirer

    monkeypatch.setattr(CameraAcquirer, "_device_node", lambda self: None)
    gates = []

    def install(frames=(), opened=True, block=False):
        gate = threading.Event() if block else None
        if gate is not None:
            gates.append(gate)
        capture = FakeCapture(frames, opened=opened, gate=gate)
        cv2 = make_fake_cv2(capture)
        monkeypatch.setitem(sys.modules, "cv2", cv2)
        return capture, cv2

    yield install
    for gate in gates:
        gate.set()
