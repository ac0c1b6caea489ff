"""Data models for feed pages, requests, settings and contact records."""

from contacts_feed.models.contact import ContactRecord, LabeledValue
from contacts_feed.models.feed import (
    FeedPage,
    LabeledListField,
    Link,
    RawEntry,
    ScalarField,
    continuation_path,
)
from contacts_feed.models.request import FeedRequest
from contacts_feed.models.settings import ClientSettings

__all__ = [
    "ClientSettings",
    "ContactRecord",
    "FeedPage",
    "FeedRequest",
    "LabeledListField",
    "LabeledValue",
    "Link",
    "RawEntry",
    "ScalarField",
    "continuation_path",
]
