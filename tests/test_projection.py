"""Unit tests for the projection engine."""

import json

import pytest
from helpers import WORK_REL, make_entry_json

from contacts_feed.models.feed import RawEntry
from contacts_feed.projection import (
    CustomProjection,
    FullProjection,
    ThinProjection,
    build_projector,
    classify_projection,
    parse_custom_schema,
    project_entries,
)


class TestClassifyProjection:
    """Tests for classify_projection."""

    def test_builtin_modes(self) -> None:
        assert classify_projection("thin") == ThinProjection()
        assert classify_projection("full") == FullProjection()

    def test_other_strings_are_custom(self) -> None:
        spec = classify_projection("property-email")
        assert spec == CustomProjection(properties=("name", "email"))

    def test_unknown_word_is_custom(self) -> None:
        """Strings that merely look like modes still parse as custom schemas."""
        assert classify_projection("THIN") == CustomProjection(properties=("name", "THIN"))

    def test_spec_passes_through(self) -> None:
        spec = CustomProjection(properties=("name",))
        assert classify_projection(spec) is spec


class TestParseCustomSchema:
    """Tests for parse_custom_schema."""

    def test_strips_prefix_and_prepends_name(self) -> None:
        assert parse_custom_schema("property-email,property-phoneNumber") == (
            "name",
            "email",
            "phoneNumber",
        )

    def test_name_moved_first(self) -> None:
        assert parse_custom_schema("property-email,property-name") == ("name", "email")

    def test_tokens_without_prefix(self) -> None:
        assert parse_custom_schema("email") == ("name", "email")

    def test_whitespace_empty_and_repeated_tokens(self) -> None:
        assert parse_custom_schema(" property-email , ,property-email") == ("name", "email")

    def test_empty_schema_is_name_only(self) -> None:
        assert parse_custom_schema("") == ("name",)


class TestThinProjection:
    """Tests for the thin projector."""

    def test_thin_record(self) -> None:
        entry = RawEntry.from_json(make_entry_json(name="Jane Doe", emails=["jane@x.com"]))
        out: list = []
        build_projector("thin")(entry, out)
        assert out == [{"name": "Jane Doe", "email": "jane@x.com"}]
        assert "phones" not in out[0]

    def test_missing_email_is_none(self, bare_entry: RawEntry) -> None:
        out: list = []
        build_projector("thin")(bare_entry, out)
        assert out == [{"name": "No Details", "email": None}]

    def test_same_entry_different_accumulators(self, jane_entry: RawEntry) -> None:
        projector = build_projector("thin")
        first: list = []
        second: list = []
        projector(jane_entry, first)
        projector(jane_entry, second)
        assert first == second
        assert first[0] is not second[0]

    def test_appends_without_touching_existing(self, jane_entry: RawEntry) -> None:
        existing = {"name": "Already", "email": None}
        out: list = [existing]
        build_projector("thin")(jane_entry, out)
        assert len(out) == 2
        assert out[0] is existing
        assert out[0] == {"name": "Already", "email": None}


class TestFullProjection:
    """Tests for the full projector."""

    def test_labeled_phones_in_source_order(self, jane_entry: RawEntry) -> None:
        out: list = []
        build_projector("full")(jane_entry, out)
        assert out == [
            {
                "name": "Jane Doe",
                "email": "jane@x.com",
                "phones": [
                    {"label": "work", "value": "555-0100"},
                    {"label": "default", "value": "555-0199"},
                ],
            }
        ]

    def test_record_is_json_serializable(self, jane_entry: RawEntry) -> None:
        """Labeled phones are plain mappings, so records dump straight to JSON."""
        out: list = []
        build_projector("full")(jane_entry, out)
        assert json.loads(json.dumps(out)) == out

    def test_no_phones_is_none(self, bare_entry: RawEntry) -> None:
        out: list = []
        build_projector("full")(bare_entry, out)
        assert out[0]["phones"] is None
        assert list(out[0]) == ["name", "email", "phones"]


class TestCustomProjection:
    """Tests for custom schema projectors."""

    def test_name_always_first(self, jane_entry: RawEntry) -> None:
        out: list = []
        build_projector("property-email")(jane_entry, out)
        assert list(out[0].keys()) == ["name", "email"]
        assert out[0] == {"name": "Jane Doe", "email": "jane@x.com"}

    def test_key_order_follows_schema(self, jane_entry: RawEntry) -> None:
        out: list = []
        build_projector("property-phoneNumber,property-email")(jane_entry, out)
        assert list(out[0].keys()) == ["name", "phoneNumber", "email"]

    def test_phone_number_collapses_to_first(self, jane_entry: RawEntry) -> None:
        out: list = []
        build_projector("property-phoneNumber")(jane_entry, out)
        assert out[0]["phoneNumber"] == "555-0100"

    def test_unknown_property_kept_as_none(self, jane_entry: RawEntry) -> None:
        out: list = []
        build_projector("property-shoeSize,property-email")(jane_entry, out)
        assert out[0] == {"name": "Jane Doe", "shoeSize": None, "email": "jane@x.com"}

    @pytest.mark.parametrize(
        "prop, raw, expected",
        [
            ("nickname", {"gContact$nickname": {"$t": "JD"}}, "JD"),
            ("birthday", {"gContact$birthday": {"when": "1980-01-02"}}, "1980-01-02"),
            ("website", {"gContact$website": [{"href": "https://jd.example", "rel": "home-page"}]}, "https://jd.example"),
            ("im", {"gd$im": [{"address": "jd@chat", "rel": WORK_REL}]}, "jd@chat"),
        ],
    )
    def test_supplementary_properties(self, prop: str, raw: dict, expected: str) -> None:
        entry = RawEntry.from_json({"title": {"$t": "JD"}, **raw})
        out: list = []
        build_projector(f"property-{prop}")(entry, out)
        assert out[0][prop] == expected


class TestProjectEntries:
    """Tests for project_entries."""

    def test_preserves_entry_order(self) -> None:
        entries = [RawEntry.from_json(make_entry_json(name=n)) for n in ("A", "B", "C")]
        records = project_entries(entries, "thin")
        assert [r["name"] for r in records] == ["A", "B", "C"]

    def test_empty(self) -> None:
        assert project_entries([], "full") == []
