"""
Transport module - Connection interfaces and the in-memory implementation.
"""

from .base import Connection, Subscription
from .memory import MemoryConnection, MemorySubscription

__all__ = [
    "Connection",
    "Subscription",
    "MemoryConnection",
    "MemorySubscription",
]
