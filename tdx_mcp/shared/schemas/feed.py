from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .ticket import TdxModel


class FeedEntry(TdxModel):
    """A single comment or update on a ticket's activity feed."""

    ID: Optional[str] = None
    Body: Optional[str] = None
    CreatedDate: Optional[str] = None
    CreatedUid: Optional[str] = None
    CreatedFullName: Optional[str] = None
    CreatedEmail: Optional[str] = None
    IsPrivate: Optional[bool] = None
    IsRichHtml: Optional[bool] = None
    ItemID: Optional[int] = None
    ItemTitle: Optional[str] = None
    Notify: Optional[List[str]] = None

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.ID,
            "date": self.CreatedDate,
            "author": self.CreatedFullName,
            "isPrivate": self.IsPrivate,
            "body": self.Body,
        }


class TicketFeedArgs(BaseModel):
    ticket_id: int = Field(..., alias="ticketId", description="The ticket ID to get the feed for")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
