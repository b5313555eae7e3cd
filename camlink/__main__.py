"""
Entry point for camlink.

Runs the motion pipeline against a simulated camera.

Usage: python -m camlink [--channel N] [--min-duration S] [--events N] [--interval S]
"""

import argparse
import asyncio
import logging
import random
import sys

from dotenv import load_dotenv

from .camera import Camera
from .config import get_settings
from .errors import CamlinkError, ConnectionLost
from .protocol.constants import ALARM_MOTION_DETECTED, ALARM_NONE, MSG_ID_MOTION
from .protocol.models import AlarmEvent, AlarmEventList, Message, MessageMeta, XmlPayload
from .transport.memory import MemoryConnection, respond_with

logger = logging.getLogger("camlink")


def setup_logging(log_level_name: str) -> None:
    """Configure logging."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def simulate_alarms(
    connection: MemoryConnection,
    msg_num: int,
    channel_id: int,
    events: int,
    interval: float,
) -> None:
    """Push random motion alarms, then drop the connection."""
    for _ in range(events):
        await asyncio.sleep(interval)
        status = random.choice([ALARM_MOTION_DETECTED, ALARM_NONE])
        connection.inject(
            msg_num,
            Message(
                meta=MessageMeta(msg_id=MSG_ID_MOTION, channel_id=channel_id, msg_num=msg_num),
                payload=XmlPayload(
                    alarm_event_list=AlarmEventList(
                        alarm_events=[AlarmEvent(channel_id=channel_id, status=status)]
                    )
                ),
            ),
        )
    connection.drop()


async def run_demo(channel_id: int, min_duration: float, events: int, interval: float) -> None:
    """Follow simulated motion until the simulated camera goes away."""
    connection = MemoryConnection(responder=respond_with())
    camera = Camera(connection, channel_id=channel_id)

    async with await camera.listen_on_motion() as motion:
        msg_num = connection.sent[-1].meta.msg_num
        feeder = asyncio.create_task(
            simulate_alarms(connection, msg_num, channel_id, events, interval)
        )
        try:
            while True:
                await motion.await_start(min_duration)
                logger.info("Motion started on channel %d", channel_id)
                await motion.await_stop(min_duration)
                logger.info("Motion stopped on channel %d", channel_id)
        except ConnectionLost:
            logger.info("Simulated camera went away")
        finally:
            feeder.cancel()


def main() -> int:
    """Run the camlink motion demo."""
    # .env may change settings already cached at import
    load_dotenv()
    get_settings.cache_clear()
    settings = get_settings()

    parser = argparse.ArgumentParser(description="camlink motion demo (simulated camera)")
    parser.add_argument("--channel", type=int, default=settings.camera.channel_id, help="Camera channel")
    parser.add_argument(
        "--min-duration",
        type=float,
        default=settings.motion.default_min_duration,
        help="Seconds a motion state must hold before it is reported",
    )
    parser.add_argument("--events", type=int, default=20, help="Number of simulated alarms")
    parser.add_argument("--interval", type=float, default=0.5, help="Seconds between simulated alarms")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    logger.info("Starting camlink motion demo on channel %d", args.channel)

    try:
        asyncio.run(run_demo(args.channel, args.min_duration, args.events, args.interval))
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except CamlinkError as e:
        logger.error("Motion demo failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
