"""Ticket activity feed tool."""

from __future__ import annotations

import logging

from tdx_mcp.core.services.tdx_client import TdxClient
from tdx_mcp.shared.schemas.feed import FeedEntry, TicketFeedArgs

from .base import Tool, to_json
from .operation_result import OperationResult

logger = logging.getLogger(__name__)


async def get_ticket_feed(args: TicketFeedArgs, client: TdxClient) -> OperationResult:
    ticket_id = args.ticket_id
    try:
        feed = await client.get(f"/tickets/{ticket_id}/feed")
        if not feed:
            return OperationResult.ok(f"No feed entries found for ticket {ticket_id}.")
        summary = [FeedEntry.model_validate(entry).summary() for entry in feed]
    except Exception as exc:
        logger.error("Error retrieving feed for ticket %s: %s", ticket_id, exc)
        return OperationResult.fail(
            f"Error retrieving feed for ticket {ticket_id}: {exc}"
        )

    return OperationResult.ok(
        f"Feed for ticket {ticket_id} ({len(summary)} entries):\n\n{to_json(summary)}"
    )


GET_TICKET_FEED = Tool(
    name="get_ticket_feed",
    description=(
        "Get the activity feed (comments, updates, status changes) for a TDX ticket."
    ),
    args_model=TicketFeedArgs,
    _implementation=get_ticket_feed,
)

FEED_TOOLS = [GET_TICKET_FEED]

__all__ = ["GET_TICKET_FEED", "FEED_TOOLS"]
