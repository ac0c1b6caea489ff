"""Pytest fixtures for contacts-feed tests."""

import pytest
from helpers import WORK_REL, make_entry_json

from contacts_feed.models.feed import RawEntry


@pytest.fixture
def jane_entry() -> RawEntry:
    """Entry with a name, two emails and a work plus an untagged phone."""
    return RawEntry.from_json(
        make_entry_json(
            name="Jane Doe",
            emails=["jane@x.com", "jane@home.com"],
            phones=[(WORK_REL, "555-0100"), (None, "555-0199")],
        )
    )


@pytest.fixture
def bare_entry() -> RawEntry:
    """Entry with only a title."""
    return RawEntry.from_json(make_entry_json(name="No Details"))
