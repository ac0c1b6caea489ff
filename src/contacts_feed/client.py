"""Contacts feed client: authenticated, paginated fetch of projected contacts.

The API caps how many entries one response carries. A truncated feed ends
with a link of relation 'next' pointing at the rest; fetch_all follows those
links one page at a time until a page arrives without one.

See https://developers.google.com/google-apps/contacts/v3/reference#ContactsFeed
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from contacts_feed.errors import ConfigError, PaginationLimitError
from contacts_feed.models.contact import ContactRecord
from contacts_feed.models.feed import FeedPage, continuation_path
from contacts_feed.models.request import FeedRequest
from contacts_feed.models.settings import ClientSettings
from contacts_feed.projection import build_projector
from contacts_feed.transport import BaseFeedTransport, HttpFeedTransport

logger = logging.getLogger(__name__)

RequestParams = Union[FeedRequest, Mapping[str, Any], None]


class ContactsClient:
    """
    Client for the contacts feed.
    Holds the current access token and OAuth consumer credentials; the
    transport does the actual network calls.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        refresh_token: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        max_pages: Optional[int] = None,
        transport: Optional[BaseFeedTransport] = None,
    ):
        """
        Args:
            token: Bearer access token
            refresh_token: Refresh token used by refresh_access_token
            client_id: OAuth consumer key
            client_secret: OAuth consumer secret
            max_pages: Cap on pages per fetch_all; None follows next links indefinitely
            transport: Optional transport (defaults to HttpFeedTransport); an injected
                transport is left open by aclose
        """
        if max_pages is not None and max_pages < 1:
            raise ConfigError("max_pages must be at least 1")
        self.token = token
        self.refresh_token = refresh_token
        self.client_id = client_id
        self.client_secret = client_secret
        self.max_pages = max_pages
        self._owns_transport = transport is None
        self._transport = transport or HttpFeedTransport()

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        transport: Optional[BaseFeedTransport] = None,
    ) -> "ContactsClient":
        """Build a client (and, unless given, an HTTP transport) from settings."""
        client = cls(
            settings.token,
            refresh_token=settings.refresh_token,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            max_pages=settings.max_pages,
            transport=transport or HttpFeedTransport(
                base_url=settings.feed_base_url,
                token_url=settings.token_url,
                timeout=settings.timeout,
            ),
        )
        client._owns_transport = transport is None
        return client

    async def __aenter__(self) -> "ContactsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    def _require_token(self) -> str:
        if not self.token:
            raise ConfigError("No access token configured")
        return self.token

    async def get_page(self, params: RequestParams = None) -> FeedPage:
        """Fetch a single feed page without following continuation links."""
        request = FeedRequest.from_params(params)
        return await self._transport.get_page(request.build_path(), self._require_token())

    async def fetch_all(
        self,
        params: RequestParams = None,
        projection: Optional[str] = None,
    ) -> list[ContactRecord]:
        """
        Fetch every page of the feed and return all projected records,
        in page order then entry order.
        projection: 'thin', 'full' or a custom schema such as
        'property-email,property-phoneNumber'; overrides params['projection'].
        Any page failure is raised as-is and no further pages are requested.
        """
        request = FeedRequest.from_params(params)
        if projection is not None:
            request = request.with_projection(projection)
        token = self._require_token()
        projector = build_projector(request.projection)

        contacts: list[ContactRecord] = []
        pages = 0
        while True:
            page = await self._transport.get_page(request.build_path(), token)
            pages += 1
            for entry in page.entries:
                projector(entry, contacts)
            logger.debug(
                "Page %d: %d entries (%d contacts so far)",
                pages,
                len(page.entries),
                len(contacts),
            )

            next_link = page.next_link()
            if next_link is None:
                break
            if self.max_pages is not None and pages >= self.max_pages:
                raise PaginationLimitError(
                    f"Feed still has a next link after {pages} pages (max_pages={self.max_pages})"
                )
            request = request.with_path(continuation_path(next_link.href))
            logger.debug("Following next link to %s", request.path)

        logger.info("Fetched %d contacts in %d page(s)", len(contacts), pages)
        return contacts

    async def refresh_access_token(self, refresh_token: Optional[str] = None) -> str:
        """
        Exchange a refresh token for a new access token.
        The new token is stored on the client and returned.
        """
        refresh_token = refresh_token or self.refresh_token
        if not refresh_token:
            raise ConfigError("No refresh token configured")
        if not self.client_id or not self.client_secret:
            raise ConfigError("client_id and client_secret are required to refresh a token")

        token = await self._transport.refresh_token(
            refresh_token,
            self.client_id,
            self.client_secret,
        )
        self.token = token
        logger.info("Access token refreshed")
        return token
