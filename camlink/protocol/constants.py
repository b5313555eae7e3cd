"""
Message ids and status codes of the camera control protocol.
"""

# Arms motion reporting; notifications follow on the same message number
MSG_ID_MOTION_REQUEST = 31
# Message id the camera uses for alarm notifications
MSG_ID_MOTION = 33
MSG_ID_FLOODLIGHT_MANUAL = 288

MSG_CLASS_MODERN = 0x6414

RESPONSE_OK = 200

# AlarmEvent.status values
ALARM_MOTION_DETECTED = "MD"
ALARM_NONE = "none"

MAX_MESSAGE_NUM = 0xFFFF
