"""Abstract base class for all frame acquirers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from photoseed.frame import RawFrame


class FrameAcquirer(ABC):
    """Something that can hand over one raw frame on demand.

    Every acquirer declares metadata and implements ``is_available`` and
    ``acquire_frame``.  Failures are raised as ``AcquisitionError``
    subclasses (or ``MalformedFrame``) and are never retried here.
    """

    name: str = "unnamed"
    description: str = ""
    platform_requirements: list[str] = []

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if a frame can be acquired on this machine."""
        ...

    @abstractmethod
    def acquire_frame(self) -> RawFrame:
        """Block until one frame is available and return it.

        Raises
        ------
        DeviceUnavailable
            No device present, or it cannot be opened.
        CapturePermissionDenied
            Access refused by the operating environment.
        CaptureTimeout
            No frame within the acquirer's bounded wait.
        MalformedFrame
            The delivered buffer disagrees with its declared shape.
        """
        ...

    def close(self) -> None:
        """Release any held device. Safe to call more than once."""

    def __enter__(self) -> FrameAcquirer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
