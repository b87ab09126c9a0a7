from .auth import AdminLoginParams, Credentials, LoginParams
from .feed import FeedEntry, TicketFeedArgs
from .ticket import (
    CustomAttributeSearch,
    NoArgs,
    SearchTicketsArgs,
    Ticket,
    TicketForm,
    TicketIdArgs,
    TicketResourcesArgs,
    TicketSearch,
)

__all__ = [
    'AdminLoginParams',
    'Credentials',
    'LoginParams',
    'FeedEntry',
    'TicketFeedArgs',
    'CustomAttributeSearch',
    'NoArgs',
    'SearchTicketsArgs',
    'Ticket',
    'TicketForm',
    'TicketIdArgs',
    'TicketResourcesArgs',
    'TicketSearch',
]
