"""
Dataclasses for protocol messages.

Only the parts of the XML payload that camlink reads or writes are
modelled; encoding to the binary wire format belongs to the transport.
"""

from dataclasses import dataclass, field
from typing import Optional

from .constants import MSG_CLASS_MODERN


@dataclass
class MessageMeta:
    """Message header."""

    msg_id: int
    channel_id: int = 0
    msg_num: int = 0
    stream_type: int = 0
    response_code: int = 0
    msg_class: int = MSG_CLASS_MODERN


@dataclass
class Extension:
    """Extension block sent alongside a payload."""

    channel_id: Optional[int] = None


@dataclass
class AlarmEvent:
    """A single alarm entry reported by the camera."""

    channel_id: int
    status: str
    ai_type: str = "none"


@dataclass
class AlarmEventList:
    """List of alarm entries carried by a motion notification."""

    alarm_events: list[AlarmEvent] = field(default_factory=list)


@dataclass
class FloodlightManual:
    """Manual floodlight switch request."""

    channel_id: int
    status: int
    duration: int
    version: str = "1"


@dataclass
class XmlPayload:
    """XML body of a modern message."""

    alarm_event_list: Optional[AlarmEventList] = None
    floodlight_manual: Optional[FloodlightManual] = None


@dataclass
class Message:
    """A protocol message: header plus optional extension and payload."""

    meta: MessageMeta
    extension: Optional[Extension] = None
    payload: Optional[XmlPayload] = None

    @property
    def response_code(self) -> int:
        return self.meta.response_code

    @property
    def alarm_events(self) -> Optional[list[AlarmEvent]]:
        """Alarm entries, or None when the message carries no alarm list."""
        if self.payload is None or self.payload.alarm_event_list is None:
            return None
        return self.payload.alarm_event_list.alarm_events
