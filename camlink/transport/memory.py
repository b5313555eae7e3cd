"""
In-memory transport for testing and simulation without a real camera.
"""

import asyncio
import logging
from typing import Callable, Optional

from ..errors import ConnectionLost, SubscriptionError, TransportError
from ..protocol.constants import RESPONSE_OK
from ..protocol.models import Message, MessageMeta
from .base import Connection, Subscription

logger = logging.getLogger("camlink.transport.memory")

Responder = Callable[[Message], Optional[Message]]

# Queued into every inbox when the connection drops
_DROPPED = object()


def respond_with(response_code: int = RESPONSE_OK) -> Responder:
    """Build a responder that answers every command with a status code."""

    def respond(message: Message) -> Message:
        return Message(
            meta=MessageMeta(
                msg_id=message.meta.msg_id,
                channel_id=message.meta.channel_id,
                response_code=response_code,
            )
        )

    return respond


class MemorySubscription(Subscription):
    """Subscription backed by an unbounded asyncio inbox."""

    def __init__(self, connection: "MemoryConnection", msg_num: int):
        self.msg_num = msg_num
        self._connection = connection
        self._inbox: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, message: Message) -> None:
        if self._closed:
            raise TransportError(f"Subscription {self.msg_num} is closed")
        await self._connection._handle_send(self, message)

    async def recv(self) -> Message:
        if self._closed:
            raise TransportError(f"Subscription {self.msg_num} is closed")
        item = await self._inbox.get()
        if item is _DROPPED:
            # Keep the marker so later calls fail the same way
            self._inbox.put_nowait(_DROPPED)
            raise ConnectionLost("Connection to camera dropped")
        return item

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._connection._release(self)

    def _deliver(self, item) -> None:
        self._inbox.put_nowait(item)


class MemoryConnection(Connection):
    """
    Connection that routes messages in-process.

    Outbound messages are recorded in `sent` and passed to an optional
    responder; a reply returned by the responder is delivered back on the
    sending subscription. Notifications are pushed with inject().
    """

    def __init__(self, responder: Optional[Responder] = None):
        self._responder = responder
        self._subscriptions: dict[int, MemorySubscription] = {}
        self._dropped = False
        self.sent: list[Message] = []

    def is_subscribed(self, msg_num: int) -> bool:
        return msg_num in self._subscriptions

    async def subscribe(self, msg_num: int) -> MemorySubscription:
        if self._dropped:
            raise ConnectionLost("Connection to camera dropped")
        if msg_num in self._subscriptions:
            raise SubscriptionError(f"Message number {msg_num} already subscribed")

        sub = MemorySubscription(self, msg_num)
        self._subscriptions[msg_num] = sub
        logger.debug("Subscribed msg_num=%d", msg_num)
        return sub

    def inject(self, msg_num: int, message: Message) -> bool:
        """
        Deliver a message to the subscriber of a message number.

        Returns:
            True if a subscriber received it
        """
        sub = self._subscriptions.get(msg_num)
        if sub is None or self._dropped:
            return False
        sub._deliver(message)
        return True

    def drop(self) -> None:
        """Tear down the connection; pending and future recv calls fail."""
        if self._dropped:
            return
        self._dropped = True
        logger.info("Dropping connection (%d subscriptions)", len(self._subscriptions))
        for sub in self._subscriptions.values():
            sub._deliver(_DROPPED)

    def _release(self, sub: MemorySubscription) -> None:
        if self._subscriptions.get(sub.msg_num) is sub:
            del self._subscriptions[sub.msg_num]
            logger.debug("Released msg_num=%d", sub.msg_num)

    async def _handle_send(self, sub: MemorySubscription, message: Message) -> None:
        if self._dropped:
            raise ConnectionLost("Connection to camera dropped")

        self.sent.append(message)
        if self._responder is None:
            return

        reply = self._responder(message)
        if reply is not None:
            reply.meta.msg_num = message.meta.msg_num
            sub._deliver(reply)
