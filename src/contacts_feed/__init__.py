"""Client for the paginated contacts feed API."""

from contacts_feed.client import ContactsClient
from contacts_feed.errors import (
    ConfigError,
    ContactsError,
    DecodeError,
    PaginationLimitError,
    StatusError,
    TransportError,
)
from contacts_feed.models import ClientSettings, FeedRequest, LabeledValue

__all__ = [
    "ClientSettings",
    "ConfigError",
    "ContactsClient",
    "ContactsError",
    "DecodeError",
    "FeedRequest",
    "LabeledValue",
    "PaginationLimitError",
    "StatusError",
    "TransportError",
]
