"""
Discord Interaction Dispatcher

Single pass per request:
  verify signature -> parse body -> branch on interaction type -> reply

The public key and content table are injected once at startup and only
read afterwards, so one dispatcher serves every request concurrently.
"""

import logging
import random
from typing import Optional

from content import ContentTable, select_content

from .envelope import RenderedResponse, render
from .errors import InvalidPayloadError
from .parser import parse_interaction
from .schemas import (
    ErrorReply,
    Interaction,
    InteractionType,
    Message,
    Pong,
    RawRequest,
    ReplyPayload,
)
from .security import verify_request

logger = logging.getLogger(__name__)

UNSIGNED_REQUEST = "Unsigned request"
BAD_REQUEST = "Bad request"


class InteractionDispatcher:
    """
    Turns a signed interaction request into a reply.

    Attributes:
        public_key_hex: Application public key used to verify requests
        content_table: Frozen category -> strings table
        rng: Random source for content selection (module PRNG if None)
    """

    def __init__(
        self,
        public_key_hex: str,
        content_table: ContentTable,
        rng: Optional[random.Random] = None,
    ):
        self.public_key_hex = public_key_hex
        self.content_table = content_table
        self.rng = rng

    def dispatch(self, request: RawRequest) -> ReplyPayload:
        """
        Run the state machine for one request.

        Never raises for bad input: unsigned requests become a 401 reply,
        malformed or unknown interactions a 400 reply.
        """

        # Start -> Authenticated
        if not verify_request(request, self.public_key_hex):
            logger.info("Unsigned request", extra={"method": request.method})
            return ErrorReply(UNSIGNED_REQUEST, status_code=401)

        # Authenticated -> Dispatched (same bytes that were verified)
        try:
            interaction = parse_interaction(request.body)
        except InvalidPayloadError as e:
            logger.info("Bad request", extra={"reason": str(e)})
            return ErrorReply(BAD_REQUEST, status_code=400)

        logger.info(
            "Valid request",
            extra={"interaction_type": interaction.type},
        )

        if interaction.type == InteractionType.PING:
            return Pong()

        if interaction.type == InteractionType.APPLICATION_COMMAND:
            return self._handle_command(interaction)

        logger.info(
            "Bad request",
            extra={"interaction_type": interaction.type},
        )
        return ErrorReply(BAD_REQUEST, status_code=400)

    def handle(self, request: RawRequest) -> RenderedResponse:
        """Dispatch and render in one go."""
        return render(self.dispatch(request))

    def _handle_command(self, interaction: Interaction) -> Message:
        # Unknown categories fall back to the whole table.
        category = interaction.category()
        content = select_content(self.content_table, category, rng=self.rng)
        logger.debug(f"Selected content for category {category!r}")
        return Message(content=content)
