"""Feed request parameters and path construction."""

from collections.abc import Mapping
from typing import Any, Optional, Union
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contacts_feed.errors import ConfigError

FEED_ROOT = "/m8/feeds/"


class FeedRequest(BaseModel):
    """
    Parameters selecting which feed page to request.
    Unset keys take the documented defaults; caller-supplied values are kept as given.
    ``path`` bypasses all other path construction and is used for continuation.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str = "contacts"
    alt: str = "json"
    projection: str = "thin"
    email: str = "default"
    max_results: int = Field(default=2000, alias="max-results")
    path: Optional[str] = None

    @classmethod
    def from_params(cls, params: Union["FeedRequest", Mapping[str, Any], None] = None) -> "FeedRequest":
        """Apply defaults to a mapping (``max-results`` or ``max_results``) or pass a request through."""
        if isinstance(params, FeedRequest):
            return params
        try:
            return cls.model_validate(dict(params or {}))
        except ValidationError as e:
            raise ConfigError(f"Invalid feed request parameters: {e}") from e

    def build_path(self) -> str:
        if self.path:
            return self.path
        query = urlencode({"alt": self.alt, "max-results": self.max_results})
        return f"{FEED_ROOT}{self.type}/{self.email}/{self.projection}?{query}"

    def with_path(self, path: str) -> "FeedRequest":
        return self.model_copy(update={"path": path})

    def with_projection(self, projection: str) -> "FeedRequest":
        return self.model_copy(update={"projection": projection})

    def to_params(self) -> dict[str, Any]:
        """Wire-style dict (``max-results`` key), omitting an unset path."""
        return self.model_dump(by_alias=True, exclude_none=True)
