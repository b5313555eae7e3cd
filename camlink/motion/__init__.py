"""
Motion module - Event listener, statuses, and the consumer session.
"""

from .listener import classify_notification, listen_for_motion
from .session import MotionSession
from .status import MotionKind, MotionStatus

__all__ = [
    "classify_notification",
    "listen_for_motion",
    "MotionSession",
    "MotionKind",
    "MotionStatus",
]
