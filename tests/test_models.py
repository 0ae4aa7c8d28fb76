"""Tests for volunteer_log.models."""

import pytest
from pydantic import ValidationError

from volunteer_log.models import Entry


class TestEntry:
    def test_required_fields(self) -> None:
        e = Entry(id="abc-1", place="Food Bank", date="2024-03-15", hours=3.5, notes="Sorted")
        assert e.id == "abc-1"
        assert e.place == "Food Bank"
        assert e.date == "2024-03-15"
        assert e.hours == 3.5
        assert e.notes == "Sorted"

    def test_notes_required(self) -> None:
        with pytest.raises(ValidationError):
            Entry(id="x", place="p", date="d", hours=1.0)

    def test_empty_strings_accepted(self) -> None:
        e = Entry(id="x", place="", date="", hours=0.0, notes="")
        assert e.place == ""
        assert e.notes == ""

    def test_int_hours_become_float(self) -> None:
        e = Entry(id="x", place="p", date="d", hours=2, notes="")
        assert e.hours == 2.0

    def test_non_numeric_hours_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Entry(id="x", place="p", date="d", hours="lots", notes="")

    def test_date_not_validated(self) -> None:
        e = Entry(id="x", place="p", date="next tuesday", hours=1.0, notes="")
        assert e.date == "next tuesday"

    def test_id_is_frozen(self) -> None:
        e = Entry(id="x", place="p", date="d", hours=1.0, notes="")
        with pytest.raises(ValidationError):
            e.id = "y"

    def test_mutable_fields_assignable(self) -> None:
        e = Entry(id="x", place="p", date="d", hours=1.0, notes="")
        e.place = "Library"
        e.hours = 4
        assert e.place == "Library"
        assert e.hours == 4.0

    def test_dump_has_exactly_the_stored_fields(self) -> None:
        e = Entry(id="x", place="p", date="d", hours=1.0, notes="n")
        assert list(e.model_dump()) == ["id", "place", "date", "hours", "notes"]

    def test_serialise_roundtrip(self) -> None:
        e = Entry(id="x", place="Shelter", date="2024-01-01", hours=1.25, notes="Night shift")
        restored = Entry.model_validate(e.model_dump())
        assert restored == e
