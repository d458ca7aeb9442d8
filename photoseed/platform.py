"""Platform detection — discover available frame acquirers."""

from __future__ import annotations

import logging
import platform as _platform

from photoseed.acquirers import ALL_ACQUIRERS
from photoseed.acquirers.base import FrameAcquirer

logger = logging.getLogger(__name__)


def detect_available_acquirers() -> list[FrameAcquirer]:
    """Instantiate and return all acquirers usable on this machine."""
    available: list[FrameAcquirer] = []
    for cls in ALL_ACQUIRERS:
        try:
            acq = cls()
        except Exception as e:
            logger.debug("skipping %s: %s", cls.__name__, e)
            continue
        if acq.is_available():
            available.append(acq)
    return available


def platform_info() -> dict:
    """Return basic platform metadata."""
    return {
        "system": _platform.system(),
        "machine": _platform.machine(),
        "platform": _platform.platform(),
        "python": _platform.python_version(),
    }
