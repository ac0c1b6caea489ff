"""httpx transport for the Contacts v3 JSON feed and the OAuth token endpoint."""

import logging
from typing import Any, Optional

import httpx

from contacts_feed.errors import DecodeError, StatusError, TransportError
from contacts_feed.models.feed import FeedPage
from contacts_feed.models.settings import DEFAULT_FEED_BASE_URL, DEFAULT_TOKEN_URL

from .base import BaseFeedTransport

logger = logging.getLogger(__name__)


class HttpFeedTransport(BaseFeedTransport):
    """
    Fetches feed pages and refreshes access tokens over HTTPS.
    Owns (and closes) its AsyncClient unless one is passed in.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "contacts-feed/0.1",
        "Accept": "application/json",
        "GData-Version": "3.0",
    }

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: str = DEFAULT_FEED_BASE_URL,
        token_url: str = DEFAULT_TOKEN_URL,
        timeout: float = 30.0,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )
        self._base_url = base_url.rstrip("/")
        self._token_url = token_url

    async def get_page(self, path: str, token: str) -> FeedPage:
        url = self._base_url + path
        headers = {"Authorization": f"Bearer {token}"}
        payload = await self._send("GET", url, headers=headers)
        return FeedPage.from_response(payload)

    async def refresh_token(self, refresh_token: str, client_id: str, client_secret: str) -> str:
        data = {
            "refresh_token": refresh_token,
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "refresh_token",
        }
        payload = await self._send("POST", self._token_url, data=data)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise DecodeError("Token response does not contain an access_token")
        return token

    async def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        """Issue one request and decode its JSON body, classifying failures."""
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning("%s %s returned status %d", method, url, resp.status_code)
            raise StatusError(resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
