"""
camlink - Client-side bridge from a binary camera-control protocol to
time-aware motion events.

Architecture:
- transport/: Multiplexed connection interfaces and an in-memory implementation
- protocol/: Message models and protocol constants
- motion/: Background listener, motion statuses, and the motion session
- camera.py: Command layer (arming, session creation, floodlight)
"""

__version__ = "0.1.0"

from .camera import Camera
from .config import Settings, get_settings, settings
from .errors import (
    CamlinkError,
    ConnectionLost,
    MissingAbility,
    SessionClosed,
    SetupRejected,
    SubscriptionError,
    TransportError,
)
from .motion import MotionKind, MotionSession, MotionStatus

__all__ = [
    # Camera
    "Camera",
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Errors
    "CamlinkError",
    "ConnectionLost",
    "MissingAbility",
    "SessionClosed",
    "SetupRejected",
    "SubscriptionError",
    "TransportError",
    # Motion
    "MotionKind",
    "MotionSession",
    "MotionStatus",
]
