"""Unit tests for the refresh event stream."""

import asyncio

from sse_starlette.sse import EventSourceResponse

from app.api.v1.events_stream import events_stream, refresh_events
from app.config import Settings


class TestRefreshEvents:
    async def test_forwards_broadcasts(self, broadcaster):
        stream = refresh_events(broadcaster)
        pending = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)  # let the generator subscribe

        broadcaster.fan_out("refresh")

        assert await asyncio.wait_for(pending, timeout=1) == {"data": "refresh"}
        await stream.aclose()

    async def test_closing_releases_subscription(self, broadcaster):
        stream = refresh_events(broadcaster)
        pending = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)
        assert broadcaster.subscriber_count == 1

        broadcaster.fan_out("refresh")
        await pending
        await stream.aclose()

        assert broadcaster.subscriber_count == 0

    async def test_cancelled_reader_releases_subscription(self, broadcaster):
        stream = refresh_events(broadcaster)
        pending = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)
        assert broadcaster.subscriber_count == 1

        pending.cancel()
        await asyncio.gather(pending, return_exceptions=True)

        assert broadcaster.subscriber_count == 0


class TestEventsStreamEndpoint:
    async def test_returns_event_source_with_keepalive(self, broadcaster):
        settings = Settings(sse_keepalive_seconds=3.0)

        response = await events_stream(broadcaster, settings)

        assert isinstance(response, EventSourceResponse)
        assert response.media_type == "text/event-stream"
        assert response.ping_interval == 3.0
