"""
Pytest fixtures for camlink tests.

Provides fixtures for:
- In-memory connection with a camera that acknowledges commands
- Camera bound to that connection
"""

import pytest

from camlink.camera import Camera
from camlink.transport.memory import MemoryConnection, respond_with


@pytest.fixture
def connection() -> MemoryConnection:
    """Connection whose camera accepts every command."""
    return MemoryConnection(responder=respond_with())


@pytest.fixture
def camera(connection) -> Camera:
    """Camera on channel 0 with short command timeout."""
    return Camera(connection, channel_id=0, command_timeout=0.5)
