"""
Protocol module - Message models and constants.
"""

from .constants import (
    ALARM_MOTION_DETECTED,
    ALARM_NONE,
    MSG_CLASS_MODERN,
    MSG_ID_FLOODLIGHT_MANUAL,
    MSG_ID_MOTION,
    MSG_ID_MOTION_REQUEST,
    RESPONSE_OK,
)
from .models import (
    AlarmEvent,
    AlarmEventList,
    Extension,
    FloodlightManual,
    Message,
    MessageMeta,
    XmlPayload,
)

__all__ = [
    # Constants
    "ALARM_MOTION_DETECTED",
    "ALARM_NONE",
    "MSG_CLASS_MODERN",
    "MSG_ID_FLOODLIGHT_MANUAL",
    "MSG_ID_MOTION",
    "MSG_ID_MOTION_REQUEST",
    "RESPONSE_OK",
    # Models
    "AlarmEvent",
    "AlarmEventList",
    "Extension",
    "FloodlightManual",
    "Message",
    "MessageMeta",
    "XmlPayload",
]
