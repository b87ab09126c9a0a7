from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TdxModel(BaseModel):
    """Lenient base for payloads returned by TDX.

    Only the fields we summarize are declared; anything else TDX sends is
    accepted and ignored.
    """

    model_config = ConfigDict(extra="allow")


class Ticket(TdxModel):
    ID: Optional[int] = None
    Title: Optional[str] = None
    StatusName: Optional[str] = None
    PriorityName: Optional[str] = None
    RequestorName: Optional[str] = None
    ResponsibleFullName: Optional[str] = None
    ResponsibleGroupName: Optional[str] = None
    CreatedDate: Optional[str] = None
    ModifiedDate: Optional[str] = None

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.ID,
            "title": self.Title,
            "status": self.StatusName,
            "priority": self.PriorityName,
            "requestor": self.RequestorName,
            "responsible": self.ResponsibleFullName,
            "responsibleGroup": self.ResponsibleGroupName,
            "created": self.CreatedDate,
            "modified": self.ModifiedDate,
        }


class TicketForm(TdxModel):
    ID: Optional[int] = None
    AppID: Optional[int] = None
    Name: Optional[str] = None
    Description: Optional[str] = None
    IsActive: Optional[bool] = None

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.ID,
            "name": self.Name,
            "description": self.Description,
            "isActive": self.IsActive,
        }


class CustomAttributeSearch(BaseModel):
    ID: str
    Value: str


class TicketSearch(BaseModel):
    """Body for ``POST /api/{appId}/tickets/search``.

    Unset filters stay ``None`` and are dropped by :meth:`to_body`.
    """

    SearchText: Optional[str] = None
    Classification: Optional[int] = None
    MaxResults: Optional[int] = None
    TicketClassification: Optional[str] = None
    StatusIDs: Optional[List[int]] = None
    PriorityIDs: Optional[List[int]] = None
    UrgencyIDs: Optional[List[int]] = None
    ImpactIDs: Optional[List[int]] = None
    AccountIDs: Optional[List[int]] = None
    TypeIDs: Optional[List[int]] = None
    SourceIDs: Optional[List[int]] = None
    ResponsibilityUids: Optional[List[str]] = None
    ResponsibilityGroupIDs: Optional[List[int]] = None
    RequestorUids: Optional[List[str]] = None
    CreatedDateFrom: Optional[str] = None
    CreatedDateTo: Optional[str] = None
    ModifiedDateFrom: Optional[str] = None
    ModifiedDateTo: Optional[str] = None
    RespondByDateFrom: Optional[str] = None
    RespondByDateTo: Optional[str] = None
    ResolveByDateFrom: Optional[str] = None
    ResolveByDateTo: Optional[str] = None
    ClosedDateFrom: Optional[str] = None
    ClosedDateTo: Optional[str] = None
    SlaViolationStatus: Optional[int] = None
    SlaIDs: Optional[List[int]] = None
    IsOnHold: Optional[bool] = None
    CustomAttributes: Optional[List[CustomAttributeSearch]] = None

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class SearchTicketsArgs(BaseModel):
    """Arguments accepted by the ``search_tickets`` tool."""

    search_text: Optional[str] = Field(
        None, alias="searchText", description="Free-text search across ticket fields"
    )
    status_ids: Optional[List[int]] = Field(
        None, alias="statusIDs", description="Filter by status IDs"
    )
    priority_ids: Optional[List[int]] = Field(
        None, alias="priorityIDs", description="Filter by priority IDs"
    )
    requestor_uids: Optional[List[str]] = Field(
        None, alias="requestorUids", description="Filter by requestor UIDs"
    )
    responsibility_uids: Optional[List[str]] = Field(
        None, alias="responsibilityUids", description="Filter by responsible person UIDs"
    )
    responsibility_group_ids: Optional[List[int]] = Field(
        None, alias="responsibilityGroupIDs", description="Filter by responsible group IDs"
    )
    created_date_from: Optional[str] = Field(
        None,
        alias="createdDateFrom",
        description="Filter tickets created on or after this date (YYYY-MM-DD)",
    )
    created_date_to: Optional[str] = Field(
        None,
        alias="createdDateTo",
        description="Filter tickets created on or before this date (YYYY-MM-DD)",
    )
    modified_date_from: Optional[str] = Field(
        None,
        alias="modifiedDateFrom",
        description="Filter tickets modified on or after this date (YYYY-MM-DD)",
    )
    modified_date_to: Optional[str] = Field(
        None,
        alias="modifiedDateTo",
        description="Filter tickets modified on or before this date (YYYY-MM-DD)",
    )
    max_results: int = Field(
        25,
        alias="maxResults",
        ge=1,
        description="Maximum number of results to return (default 25)",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_search(self) -> TicketSearch:
        """Collapse the supplied filters into a search body.

        Empty strings and empty lists count as not supplied.
        """
        return TicketSearch(
            MaxResults=self.max_results,
            SearchText=self.search_text or None,
            StatusIDs=self.status_ids or None,
            PriorityIDs=self.priority_ids or None,
            RequestorUids=self.requestor_uids or None,
            ResponsibilityUids=self.responsibility_uids or None,
            ResponsibilityGroupIDs=self.responsibility_group_ids or None,
            CreatedDateFrom=self.created_date_from or None,
            CreatedDateTo=self.created_date_to or None,
            ModifiedDateFrom=self.modified_date_from or None,
            ModifiedDateTo=self.modified_date_to or None,
        )


class TicketIdArgs(BaseModel):
    ticket_id: int = Field(..., alias="ticketId", description="The ticket ID to retrieve")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NoArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TicketResourcesArgs(BaseModel):
    search_text: str = Field(
        "",
        alias="searchText",
        description="Search text to filter resources (max 5 results returned)",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
