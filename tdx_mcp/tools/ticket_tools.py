"""Ticket search and lookup tools."""

from __future__ import annotations

import logging
from urllib.parse import quote, urlencode

from tdx_mcp.core.services.tdx_client import TdxClient
from tdx_mcp.shared.schemas.ticket import (
    NoArgs,
    SearchTicketsArgs,
    Ticket,
    TicketForm,
    TicketIdArgs,
    TicketResourcesArgs,
)

from .base import Tool, to_json
from .operation_result import OperationResult

logger = logging.getLogger(__name__)

# Left unescaped, matching encodeURIComponent
_URI_COMPONENT_SAFE = "!'()*"


async def search_tickets(args: SearchTicketsArgs, client: TdxClient) -> OperationResult:
    """Search tickets and return a compact summary of each match."""
    try:
        tickets = await client.post("/tickets/search", args.to_search().to_body())
        if not tickets:
            return OperationResult.ok("No tickets found matching the search criteria.")
        summary = [Ticket.model_validate(t).summary() for t in tickets]
    except Exception as exc:
        logger.error("Error searching tickets: %s", exc)
        return OperationResult.fail(f"Error searching tickets: {exc}")

    return OperationResult.ok(f"Found {len(summary)} ticket(s):\n\n{to_json(summary)}")


async def get_ticket(args: TicketIdArgs, client: TdxClient) -> OperationResult:
    try:
        ticket = await client.get(f"/tickets/{args.ticket_id}")
    except Exception as exc:
        logger.error("Error retrieving ticket %s: %s", args.ticket_id, exc)
        return OperationResult.fail(f"Error retrieving ticket {args.ticket_id}: {exc}")
    return OperationResult.ok(to_json(ticket))


async def get_ticket_forms(_args: NoArgs, client: TdxClient) -> OperationResult:
    try:
        forms = await client.get("/tickets/forms")
        if not forms:
            return OperationResult.ok("No active ticket forms found.")
        summary = [TicketForm.model_validate(f).summary() for f in forms]
    except Exception as exc:
        logger.error("Error retrieving ticket forms: %s", exc)
        return OperationResult.fail(f"Error retrieving ticket forms: {exc}")

    return OperationResult.ok(f"Found {len(summary)} form(s):\n\n{to_json(summary)}")


async def get_ticket_resources(
    args: TicketResourcesArgs, client: TdxClient
) -> OperationResult:
    """Look up people and groups a ticket can be assigned to.

    TDX caps this endpoint at five results.
    """
    query = ""
    if args.search_text:
        params = {"searchText": args.search_text}
        query = "?" + urlencode(params, safe=_URI_COMPONENT_SAFE, quote_via=quote)
    try:
        resources = await client.get(f"/tickets/resources{query}")
        if not resources:
            return OperationResult.ok("No matching resources found.")
    except Exception as exc:
        logger.error("Error retrieving resources: %s", exc)
        return OperationResult.fail(f"Error retrieving resources: {exc}")

    return OperationResult.ok(
        f"Found {len(resources)} resource(s):\n\n{to_json(resources)}"
    )


SEARCH_TICKETS = Tool(
    name="search_tickets",
    description=(
        "Search for TDX tickets with filters. Returns a list of matching tickets "
        "(limited fields)."
    ),
    args_model=SearchTicketsArgs,
    _implementation=search_tickets,
)

GET_TICKET = Tool(
    name="get_ticket",
    description="Get full details of a specific TDX ticket by ID.",
    args_model=TicketIdArgs,
    _implementation=get_ticket,
)

GET_TICKET_FORMS = Tool(
    name="get_ticket_forms",
    description="List all active ticket forms for the TDX ticketing application.",
    args_model=NoArgs,
    _implementation=get_ticket_forms,
)

GET_TICKET_RESOURCES = Tool(
    name="get_ticket_resources",
    description="Search for eligible ticket assignment resources (people/groups).",
    args_model=TicketResourcesArgs,
    _implementation=get_ticket_resources,
)

TICKET_TOOLS = [SEARCH_TICKETS, GET_TICKET, GET_TICKET_FORMS, GET_TICKET_RESOURCES]

__all__ = [
    "SEARCH_TICKETS",
    "GET_TICKET",
    "GET_TICKET_FORMS",
    "GET_TICKET_RESOURCES",
    "TICKET_TOOLS",
]
