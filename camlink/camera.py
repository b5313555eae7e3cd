"""
Camera command layer.

Wraps a multiplexed connection with the command/acknowledgement
exchanges camlink needs: arming motion reporting, building motion
sessions, and switching the floodlight.
"""

import asyncio
import logging
from typing import Optional

from .config import get_settings
from .errors import MissingAbility, SetupRejected
from .motion.listener import listen_for_motion
from .motion.session import MotionSession
from .protocol.constants import (
    MAX_MESSAGE_NUM,
    MSG_ID_FLOODLIGHT_MANUAL,
    MSG_ID_MOTION_REQUEST,
    RESPONSE_OK,
)
from .protocol.models import Extension, FloodlightManual, Message, MessageMeta, XmlPayload
from .transport.base import Connection

logger = logging.getLogger("camlink.camera")


class Camera:
    """
    One channel of a camera reachable over a multiplexed connection.

    Features:
    - Message number allocation
    - Ability checks before privileged commands
    - Motion session creation
    - Floodlight control
    """

    def __init__(
        self,
        connection: Connection,
        channel_id: Optional[int] = None,
        abilities: Optional[dict[str, str]] = None,
        motion_queue_size: Optional[int] = None,
        command_timeout: Optional[float] = None,
    ):
        """
        Initialize the camera.

        Args:
            connection: Transport connection to the camera
            channel_id: Camera channel (defaults to settings)
            abilities: Ability name to permission ("rw", "ro", ...); None skips checks
            motion_queue_size: Capacity of the motion status queue (defaults to settings)
            command_timeout: Seconds to wait for a command acknowledgement (defaults to settings)
        """
        config = get_settings()
        self._connection = connection
        self.channel_id = config.camera.channel_id if channel_id is None else channel_id
        self._abilities = abilities
        self._motion_queue_size = motion_queue_size or config.motion.queue_size
        self._command_timeout = command_timeout or config.camera.command_timeout
        self._msg_num = 0

    def new_message_num(self) -> int:
        """Allocate the next message number (wraps at 16 bits)."""
        self._msg_num = (self._msg_num + 1) % (MAX_MESSAGE_NUM + 1)
        return self._msg_num

    def has_ability_rw(self, ability: str) -> None:
        """
        Require read/write access to an ability.

        Raises:
            MissingAbility: If the ability table is known and lacks rw access
        """
        if self._abilities is None:
            return
        permission = self._abilities.get(ability, "")
        if "r" not in permission or "w" not in permission:
            raise MissingAbility(ability)

    async def _command(
        self,
        msg_id: int,
        why: str,
        payload: Optional[XmlPayload] = None,
        extension: Optional[Extension] = None,
    ) -> int:
        """
        Send a command on a fresh message number and require a 200 reply.

        Returns:
            The message number used for the command

        Raises:
            SetupRejected: If the reply is missing or not 200
        """
        msg_num = self.new_message_num()
        message = Message(
            meta=MessageMeta(
                msg_id=msg_id,
                channel_id=self.channel_id,
                msg_num=msg_num,
            ),
            extension=extension,
            payload=payload,
        )

        async with await self._connection.subscribe(msg_num) as sub:
            await sub.send(message)
            try:
                reply = await asyncio.wait_for(sub.recv(), timeout=self._command_timeout)
            except asyncio.TimeoutError:
                raise SetupRejected(f"{why} (no reply within {self._command_timeout}s)")

        if reply.response_code != RESPONSE_OK:
            logger.warning(
                "Command %d rejected with code %d: %s",
                msg_id,
                reply.response_code,
                why,
            )
            raise SetupRejected(why, reply=reply)

        return msg_num

    async def start_motion_query(self) -> int:
        """
        Ask the camera to report motion events.

        Returns:
            Message number the motion notifications will arrive on
        """
        self.has_ability_rw("motion")
        msg_num = await self._command(
            MSG_ID_MOTION_REQUEST,
            why="The camera did not accept the request to start motion",
        )
        logger.info("Motion reporting armed on channel %d (msg_num=%d)", self.channel_id, msg_num)
        return msg_num

    async def listen_on_motion(self) -> MotionSession:
        """
        Arm motion reporting and start a session on its notifications.

        Raises:
            SetupRejected: If the camera refuses to report motion
            MissingAbility: If the camera lacks the motion ability
        """
        msg_num = await self.start_motion_query()

        subscription = await self._connection.subscribe(msg_num)
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._motion_queue_size)
        task = asyncio.create_task(
            listen_for_motion(subscription, self.channel_id, queue),
            name=f"camlink-motion-{self.channel_id}",
        )
        return MotionSession(task, queue)

    async def set_floodlight_manual(self, state: bool, duration: int) -> None:
        """
        Switch the floodlight on or off.

        Args:
            state: True to switch on
            duration: Seconds the floodlight stays in the requested state
        """
        payload = XmlPayload(
            floodlight_manual=FloodlightManual(
                channel_id=self.channel_id,
                status=1 if state else 0,
                duration=duration,
            )
        )
        await self._command(
            MSG_ID_FLOODLIGHT_MANUAL,
            why="The camera did not accept the Floodlight manual state",
            payload=payload,
            extension=Extension(channel_id=self.channel_id),
        )
        logger.info(
            "Floodlight %s on channel %d for %ds",
            "on" if state else "off",
            self.channel_id,
            duration,
        )
