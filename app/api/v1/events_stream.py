"""Server-Sent Events stream that tells displays when to refresh."""

from collections.abc import AsyncIterator

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from app.core.broadcaster import Broadcaster
from app.dependencies import AppSettings, BroadcasterDep
from app.rate_limit import limiter

router = APIRouter()


async def refresh_events(broadcaster: Broadcaster) -> AsyncIterator[dict[str, str]]:
    """Yield one SSE event per broadcast for as long as the client listens."""
    async with broadcaster.subscription() as queue:
        while True:
            message = await queue.get()
            yield {"data": message}


@router.get("/events-stream")
@limiter.exempt
async def events_stream(
    broadcaster: BroadcasterDep,
    settings: AppSettings,
) -> EventSourceResponse:
    """Subscribe to refresh notifications.

    Idle connections get a ping comment every ``sse_keepalive_seconds``.
    """
    return EventSourceResponse(
        refresh_events(broadcaster),
        ping=settings.sse_keepalive_seconds,
    )
