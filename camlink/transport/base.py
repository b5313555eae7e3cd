"""
Transport interfaces.

The transport multiplexes request/response traffic over one connection,
correlating messages by message number. Framing, encryption and the
binary encoding live behind these interfaces.
"""

from abc import ABC, abstractmethod

from ..protocol.models import Message


class Subscription(ABC):
    """
    Receives the messages correlated with one message number.

    Usable as an async context manager, which closes the subscription on exit.
    """

    msg_num: int

    @abstractmethod
    async def send(self, message: Message) -> None:
        """
        Send a message on this subscription.

        Raises:
            TransportError: If the message could not be sent
        """
        ...

    @abstractmethod
    async def recv(self) -> Message:
        """
        Wait for the next message addressed to this subscription.

        Raises:
            ConnectionLost: If the connection is torn down
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the correlation slot. Safe to call more than once."""
        ...

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


class Connection(ABC):
    """A multiplexed connection to a camera."""

    @abstractmethod
    async def subscribe(self, msg_num: int) -> Subscription:
        """
        Allocate a subscription for a message number.

        Raises:
            SubscriptionError: If the message number is already in use
            ConnectionLost: If the connection is down
        """
        ...
