"""
Motion status values produced by the listener.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


def now() -> float:
    """Monotonic clock in seconds."""
    return time.monotonic()


class MotionKind(Enum):
    """Kind of motion status."""

    START = "start"          # Motion became active
    STOP = "stop"            # Motion became inactive
    NO_CHANGE = "no_change"  # Notification without motion information

    def opposite(self) -> "MotionKind":
        if self is MotionKind.START:
            return MotionKind.STOP
        if self is MotionKind.STOP:
            return MotionKind.START
        return self


@dataclass(frozen=True)
class MotionStatus:
    """A motion classification and the monotonic time it was produced."""

    kind: MotionKind
    timestamp: float = field(default_factory=now)

    @classmethod
    def start(cls, timestamp: Optional[float] = None) -> "MotionStatus":
        return cls(MotionKind.START, now() if timestamp is None else timestamp)

    @classmethod
    def stop(cls, timestamp: Optional[float] = None) -> "MotionStatus":
        return cls(MotionKind.STOP, now() if timestamp is None else timestamp)

    @classmethod
    def no_change(cls, timestamp: Optional[float] = None) -> "MotionStatus":
        return cls(MotionKind.NO_CHANGE, now() if timestamp is None else timestamp)
