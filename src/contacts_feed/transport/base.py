"""Abstract transport used by the client to reach the feed and token endpoints."""

from abc import ABC, abstractmethod

from contacts_feed.models.feed import FeedPage


class BaseFeedTransport(ABC):
    """
    One-shot, non-retrying network primitives.
    Implementations raise TransportError, StatusError or DecodeError.
    """

    @abstractmethod
    async def get_page(self, path: str, token: str) -> FeedPage:
        """
        GET one feed page at path (including query) with a bearer token.
        """

    @abstractmethod
    async def refresh_token(self, refresh_token: str, client_id: str, client_secret: str) -> str:
        """
        Exchange a refresh token for a new access token.
        """

    async def aclose(self) -> None:
        """Release any held connections. Default: nothing to release."""
