"""Fire-and-forget refresh notifications for connected display clients.

Each SSE connection owns a bounded queue registered with the process-wide
``Broadcaster``. Publishing goes through a Redis pub/sub channel when Redis
is configured, so every worker process relays the message to its own
subscribers; otherwise messages fan out in-process only.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.constants import REFRESH_MESSAGE
from app.utils.logging import get_logger

logger = get_logger(__name__)

SUBSCRIBER_QUEUE_SIZE = 16
RELAY_RECONNECT_DELAY_SECONDS = 5.0


class Broadcaster:
    """Registry of live subscribers with best-effort delivery."""

    def __init__(
        self,
        redis: Redis | None = None,
        channel: str = "building-dashboard:refresh",
        reconnect_delay: float = RELAY_RECONNECT_DELAY_SECONDS,
    ) -> None:
        self._redis = redis
        self._channel = channel
        self._reconnect_delay = reconnect_delay
        self._subscribers: set[asyncio.Queue[str]] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @asynccontextmanager
    async def subscription(self) -> AsyncIterator[asyncio.Queue[str]]:
        """Register a subscriber queue for the lifetime of the block."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=SUBSCRIBER_QUEUE_SIZE)
        self._subscribers.add(queue)
        logger.debug("broadcast_subscribed", subscribers=len(self._subscribers))
        try:
            yield queue
        finally:
            self._subscribers.discard(queue)
            logger.debug("broadcast_unsubscribed", subscribers=len(self._subscribers))

    def fan_out(self, message: str) -> int:
        """Deliver *message* to every local subscriber without blocking.

        Returns the number of subscribers that accepted it.
        """
        delivered = 0
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(message)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning("broadcast_subscriber_lagging")
        return delivered

    async def publish(self, message: str = REFRESH_MESSAGE) -> None:
        """Notify all connected clients. Never raises."""
        if self._redis is not None:
            try:
                await self._redis.publish(self._channel, message)
                return
            except RedisError:
                logger.warning("broadcast_publish_failed", channel=self._channel, exc_info=True)
        self.fan_out(message)

    async def relay(self) -> None:
        """Forward messages from the Redis channel to local subscribers.

        Runs until cancelled; reconnects after Redis errors.
        """
        if self._redis is None:
            return

        while True:
            pubsub = self._redis.pubsub()
            try:
                await pubsub.subscribe(self._channel)
                logger.info("broadcast_relay_listening", channel=self._channel)
                async for message in pubsub.listen():
                    self._dispatch(message)
            except RedisError:
                logger.warning("broadcast_relay_disconnected", exc_info=True)
            finally:
                await pubsub.aclose()
            await asyncio.sleep(self._reconnect_delay)

    def _dispatch(self, message: dict[str, Any]) -> None:
        if message.get("type") != "message":
            return
        data = message.get("data")
        if isinstance(data, bytes):
            data = data.decode()
        self.fan_out(str(data))
