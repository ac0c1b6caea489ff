"""Feed page, link and raw entry representations.

The upstream JSON encodes every entry property either as a single object
(``{"$t": "Jane"}``) or as an array of objects, each optionally tagged with a
``rel`` URI (``[{"rel": "...#work", "$t": "555"}]``). The shape is decided once
here, when the entry is parsed, so extraction never has to re-inspect it.
"""

from typing import Annotated, Any, Literal, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contacts_feed.errors import DecodeError


class ScalarField(BaseModel):
    """A property carried as one object on the entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    item: dict[str, Any] = Field(default_factory=dict)


class LabeledListField(BaseModel):
    """A property carried as an array of (possibly rel-tagged) objects."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    items: list[dict[str, Any]] = Field(default_factory=list)


FieldValue = Annotated[Union[ScalarField, LabeledListField], Field(discriminator="kind")]


class RawEntry(BaseModel):
    """
    One contact entry as found in a feed page.
    Never mutated after parsing.
    """

    model_config = ConfigDict(frozen=True)

    fields: dict[str, FieldValue] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "RawEntry":
        """Classify each property of a decoded JSON entry. Unusable values are dropped."""
        fields: dict[str, Union[ScalarField, LabeledListField]] = {}
        for name, value in data.items():
            if isinstance(value, dict):
                fields[name] = ScalarField(item=value)
            elif isinstance(value, list):
                fields[name] = LabeledListField(
                    items=[item for item in value if isinstance(item, dict)]
                )
        return cls(fields=fields)

    def get(self, name: str) -> Optional[Union[ScalarField, LabeledListField]]:
        return self.fields.get(name)


class Link(BaseModel):
    """Navigation link attached to a feed page."""

    model_config = ConfigDict(extra="ignore")

    rel: str = ""
    href: str = ""
    type: Optional[str] = None


class FeedPage(BaseModel):
    """One decoded response: a batch of entries plus navigation links."""

    entries: list[RawEntry] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    total_results: Optional[int] = None

    @classmethod
    def from_response(cls, payload: Any) -> "FeedPage":
        """
        Build a page from the ``{"feed": {...}}`` envelope.
        A feed with no ``entry`` key is an empty page; a body without a feed
        object raises DecodeError.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("feed"), dict):
            raise DecodeError("Response body does not contain a feed object")
        feed = payload["feed"]

        raw_entries = feed.get("entry") or []
        raw_links = feed.get("link") or []
        if not isinstance(raw_entries, list) or not isinstance(raw_links, list):
            raise DecodeError("Feed entry and link members must be arrays")

        total = feed.get("openSearch$totalResults")
        try:
            return cls(
                entries=[RawEntry.from_json(e) for e in raw_entries if isinstance(e, dict)],
                links=[Link.model_validate(link) for link in raw_links if isinstance(link, dict)],
                total_results=int(total["$t"]) if isinstance(total, dict) and "$t" in total else None,
            )
        except (ValidationError, ValueError, TypeError) as e:
            raise DecodeError(f"Malformed feed: {e}") from e

    def next_link(self) -> Optional[Link]:
        """
        Return the first link with relation ``next``, if any.
        A next link without a target raises DecodeError.
        """
        for link in self.links:
            if link.rel == "next":
                if not link.href.strip():
                    raise DecodeError("Feed has a next link without an href")
                return link
        return None


def continuation_path(href: str) -> str:
    """Path and query of a next-link target; scheme and host are dropped."""
    parts = urlsplit(href)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path
