"""Read one logical value off a raw feed entry."""

from typing import Any, Optional

from contacts_feed.models.contact import LabeledValue
from contacts_feed.models.feed import RawEntry, ScalarField

from .constants import DEFAULT_LABEL


def label_from_rel(rel: Optional[str], delimiter: str) -> str:
    """
    Second segment of a rel URI split on delimiter.
    'http://schemas.google.com/g/2005#work' -> 'work'; missing rel -> 'default'.
    """
    if not rel:
        return DEFAULT_LABEL
    parts = rel.split(delimiter)
    if len(parts) < 2 or not parts[1]:
        return DEFAULT_LABEL
    return parts[1]


def extract(
    entry: RawEntry,
    field_name: str,
    attribute_name: str,
    delimiter: Optional[str] = None,
) -> Any:
    """
    Return attribute_name of the entry's field_name, or None if absent.
    Multi-valued fields collapse to their first item unless a delimiter is
    given, in which case every item is returned as a {label, value} dict.
    """
    field = entry.get(field_name)
    if field is None:
        return None
    if isinstance(field, ScalarField):
        return field.item.get(attribute_name)
    if delimiter:
        return [
            LabeledValue(
                label=label_from_rel(item.get("rel"), delimiter),
                value=item.get(attribute_name),
            ).model_dump()
            for item in field.items
        ]
    if not field.items:
        return None
    return field.items[0].get(attribute_name)
