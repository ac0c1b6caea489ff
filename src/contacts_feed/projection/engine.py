"""Projection engine: turn raw feed entries into flat contact records.

A projection mode is resolved once into ThinProjection, FullProjection or
CustomProjection. Any string other than 'thin' or 'full' is read as a custom
schema, e.g. 'property-email,property-phoneNumber'.

Projectors append to the accumulator they are called with; they hold no
output state of their own.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import Any, Union

from contacts_feed.models.contact import ContactRecord
from contacts_feed.models.feed import RawEntry

from .constants import (
    ADDRESS,
    EMAIL,
    FULL,
    PHONE_NUMBER,
    PROPERTY_FIELDS,
    PROPERTY_PREFIX,
    REL_DELIMITER,
    TEXT,
    THIN,
    TITLE,
)
from .extractor import extract

logger = logging.getLogger(__name__)

Projector = Callable[[RawEntry, list[ContactRecord]], None]


@dataclass(frozen=True)
class ThinProjection:
    """Name and primary email."""


@dataclass(frozen=True)
class FullProjection:
    """Name, primary email and every labeled phone number."""


@dataclass(frozen=True)
class CustomProjection:
    """Ordered logical properties; 'name' is always first."""

    properties: tuple[str, ...]


ProjectionSpec = Union[ThinProjection, FullProjection, CustomProjection]


def parse_custom_schema(schema: str) -> tuple[str, ...]:
    """
    Split a comma-separated schema into logical property names.
    Strips the 'property-' prefix, drops repeats, and puts 'name' first.
    """
    props: list[str] = []
    for token in schema.split(","):
        prop = token.strip().replace(PROPERTY_PREFIX, "", 1)
        if prop and prop not in props:
            props.append(prop)
    if "name" in props:
        props.remove("name")
    return ("name", *props)


def classify_projection(mode: Union[str, ProjectionSpec]) -> ProjectionSpec:
    """Resolve a mode string; anything that is not a built-in mode is a custom schema."""
    if isinstance(mode, (ThinProjection, FullProjection, CustomProjection)):
        return mode
    if mode == THIN:
        return ThinProjection()
    if mode == FULL:
        return FullProjection()
    return CustomProjection(properties=parse_custom_schema(mode))


def _thin_record(entry: RawEntry) -> ContactRecord:
    return {
        "name": extract(entry, TITLE, TEXT),
        "email": extract(entry, EMAIL, ADDRESS),
    }


def _project_thin(entry: RawEntry, accumulator: list[ContactRecord]) -> None:
    accumulator.append(_thin_record(entry))


def _project_full(entry: RawEntry, accumulator: list[ContactRecord]) -> None:
    record = _thin_record(entry)
    record["phones"] = extract(entry, PHONE_NUMBER, TEXT, REL_DELIMITER)
    accumulator.append(record)


def _missing(entry: RawEntry) -> Any:
    return None


def _custom_projector(properties: tuple[str, ...]) -> Projector:
    extractors: list[tuple[str, Callable[[RawEntry], Any]]] = []
    for prop in properties:
        location = PROPERTY_FIELDS.get(prop)
        if location is None:
            logger.debug("Unknown projection property %r; values will be None", prop)
            extractors.append((prop, _missing))
            continue
        field_name, attribute_name = location
        extractors.append(
            (prop, partial(extract, field_name=field_name, attribute_name=attribute_name))
        )

    def project(entry: RawEntry, accumulator: list[ContactRecord]) -> None:
        accumulator.append({prop: fn(entry) for prop, fn in extractors})

    return project


def build_projector(mode: Union[str, ProjectionSpec]) -> Projector:
    """Return a function that appends one record per entry to the given accumulator."""
    spec = classify_projection(mode)
    if isinstance(spec, ThinProjection):
        return _project_thin
    if isinstance(spec, FullProjection):
        return _project_full
    return _custom_projector(spec.properties)


def project_entries(
    entries: Iterable[RawEntry],
    mode: Union[str, ProjectionSpec],
) -> list[ContactRecord]:
    """Project entries into a new list of records."""
    projector = build_projector(mode)
    records: list[ContactRecord] = []
    for entry in entries:
        projector(entry, records)
    return records
