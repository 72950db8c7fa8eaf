"""
Discord Interactions Webhook

FastAPI router for the interactions endpoint.
No verification or dispatch logic here. Pure transport.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status

from .dispatcher import InteractionDispatcher
from .envelope import to_response
from .schemas import RawRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Discord Interactions"])


def get_dispatcher(request: Request) -> InteractionDispatcher:
    """Dispatcher built at startup and stored on app.state."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        logger.error("Interaction dispatcher not initialized")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return dispatcher


@router.post("/")
async def discord_interactions(request: Request) -> Response:
    """
    Receive a Discord interaction.

    Flow:
    1. Buffer the full raw body (the signature covers every byte)
    2. Hand headers + body to the dispatcher
    3. Return the rendered envelope

    Returns:
        200 {"type": 1}                             Ping
        200 {"type": 4, "data": {"content": "..."}} Command
        400 {"error": "Bad request"}                Malformed / unknown type
        401 {"error": "Unsigned request"}           Missing / bad signature
    """

    dispatcher = get_dispatcher(request)

    body = await request.body()
    raw = RawRequest(
        method=request.method,
        headers=dict(request.headers),
        body=body,
    )

    rendered = dispatcher.handle(raw)
    return to_response(rendered)
