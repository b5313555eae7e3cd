"""
Exception hierarchy for camlink.

Transport errors come from the connection layer. Setup errors abort
session creation. Session errors are surfaced by MotionSession queries.
"""

from typing import Any, Optional


class CamlinkError(Exception):
    """Base class for all camlink errors."""


class TransportError(CamlinkError):
    """The underlying connection failed."""


class ConnectionLost(TransportError):
    """The connection to the camera was torn down."""


class SubscriptionError(TransportError):
    """No correlation slot could be allocated for a message number."""


class SetupRejected(CamlinkError):
    """The camera did not acknowledge a command with status 200."""

    def __init__(self, why: str, reply: Optional[Any] = None):
        super().__init__(why)
        self.why = why
        self.reply = reply


class MissingAbility(CamlinkError):
    """The camera does not grant read/write access to an ability."""

    def __init__(self, ability: str):
        super().__init__(f"Camera lacks read/write ability: {ability}")
        self.ability = ability


class SessionClosed(CamlinkError):
    """The motion session ended without a reported transport failure."""
