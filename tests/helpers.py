"""Feed JSON builders and an in-memory transport shared by the tests."""

from typing import Any, Optional

from contacts_feed.errors import ContactsError
from contacts_feed.models.feed import FeedPage
from contacts_feed.transport.base import BaseFeedTransport

WORK_REL = "http://schemas.google.com/g/2005#work"
HOME_REL = "http://schemas.google.com/g/2005#home"


def make_entry_json(
    name: Optional[str] = None,
    emails: Optional[list[str]] = None,
    phones: Optional[list[tuple[Optional[str], str]]] = None,
) -> dict[str, Any]:
    """Build an entry in the feed's JSON encoding. phones: (rel or None, number)."""
    entry: dict[str, Any] = {}
    if name is not None:
        entry["title"] = {"$t": name, "type": "text"}
    if emails:
        entry["gd$email"] = [
            {"address": a, "rel": WORK_REL, "primary": "true" if i == 0 else "false"}
            for i, a in enumerate(emails)
        ]
    if phones:
        entry["gd$phoneNumber"] = [
            {"$t": number, **({"rel": rel} if rel else {})} for rel, number in phones
        ]
    return entry


def make_feed_json(
    entries: list[dict[str, Any]],
    next_href: Optional[str] = None,
    extra_links: Optional[list[dict[str, str]]] = None,
) -> dict[str, Any]:
    """Wrap entries in the {"feed": {...}} envelope, with an optional next link."""
    links: list[dict[str, str]] = [
        {
            "rel": "self",
            "type": "application/atom+xml",
            "href": "https://www.google.com/m8/feeds/contacts/default/thin?alt=json",
        }
    ]
    if next_href:
        links.append({"rel": "next", "type": "application/atom+xml", "href": next_href})
    links.extend(extra_links or [])
    feed: dict[str, Any] = {
        "openSearch$totalResults": {"$t": str(len(entries))},
        "link": links,
    }
    if entries:
        feed["entry"] = entries
    return {"feed": feed}


class FakeTransport(BaseFeedTransport):
    """In-memory transport serving pages (or errors) keyed by request path."""

    def __init__(self, pages: Optional[dict[str, Any]] = None, token: str = "new-token"):
        self.pages = pages or {}
        self.requested: list[tuple[str, str]] = []
        self.refresh_calls: list[tuple[str, str, str]] = []
        self.new_token = token
        self.closed = False

    async def get_page(self, path: str, token: str) -> FeedPage:
        self.requested.append((path, token))
        result = self.pages[path]
        if isinstance(result, ContactsError):
            raise result
        return FeedPage.from_response(result)

    async def refresh_token(self, refresh_token: str, client_id: str, client_secret: str) -> str:
        self.refresh_calls.append((refresh_token, client_id, client_secret))
        return self.new_token

    async def aclose(self) -> None:
        self.closed = True
