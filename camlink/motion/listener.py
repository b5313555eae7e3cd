"""
Background listener that turns camera notifications into motion statuses.

The listener owns one subscription and pushes into a bounded queue, so a
slow consumer throttles how fast notifications are read off the transport.
"""

import asyncio
import logging

from ..errors import ConnectionLost, SessionClosed, TransportError
from ..protocol.constants import ALARM_MOTION_DETECTED, ALARM_NONE
from ..protocol.models import Message
from ..transport.base import Subscription
from .status import MotionStatus

logger = logging.getLogger("camlink.motion.listener")


def classify_notification(message: Message, channel_id: int) -> MotionStatus:
    """
    Classify a notification for one camera channel.

    The first alarm entry for the channel decides: "MD" is a start,
    "none" is a stop, anything else carries no motion information.
    """
    alarm_events = message.alarm_events
    if alarm_events is None:
        return MotionStatus.no_change()

    for alarm_event in alarm_events:
        if alarm_event.channel_id != channel_id:
            continue
        if alarm_event.status == ALARM_MOTION_DETECTED:
            return MotionStatus.start()
        if alarm_event.status == ALARM_NONE:
            return MotionStatus.stop()
        break

    return MotionStatus.no_change()


async def listen_for_motion(
    subscription: Subscription,
    channel_id: int,
    queue: asyncio.Queue,
) -> None:
    """
    Read notifications until the transport fails or the task is cancelled.

    A transport failure is pushed once as ConnectionLost. The subscription
    is closed on every exit path, cancellation included.
    """
    logger.debug(
        "Motion listener started (channel=%d, msg_num=%d)",
        channel_id,
        subscription.msg_num,
    )
    try:
        while True:
            # Fairness point under a tight notification stream
            await asyncio.sleep(0)

            try:
                message = await subscription.recv()
            except TransportError as e:
                logger.warning("Motion connection lost on channel %d: %s", channel_id, e)
                error = ConnectionLost(f"Motion connection lost: {e}")
                error.__cause__ = e
                await queue.put(error)
                return

            status = classify_notification(message, channel_id)
            logger.debug("Channel %d motion status: %s", channel_id, status.kind.value)
            await queue.put(status)

    except asyncio.CancelledError:
        logger.debug("Motion listener cancelled (channel=%d)", channel_id)
        raise

    except Exception as e:
        logger.exception("Motion listener crashed on channel %d", channel_id)
        await queue.put(SessionClosed(f"Motion listener stopped unexpectedly: {e}"))

    finally:
        subscription.close()
