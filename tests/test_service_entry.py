"""Tests for the entry operations (add, note, unplanned, actual, done, rm)."""

import pytest

from conftest import FIXED_WEEK
from weekplan.exception import (
    InvalidDay,
    InvalidTimeFormat,
    MissingArgument,
    NoteHasNoTimes,
    NotFound,
)
from weekplan.repository.entry import ENTRY_REPO
from weekplan.repository.tag import TAG_REPO
from weekplan.service import entry as entry_service


class TestAddBlock:
    def test_creates_planned_block(self, clock):
        block = entry_service.add_block(
            "monday", "9:00-10:30", "deep work #project", clock=clock
        )

        assert block["id"] is not None and len(block["id"]) == 6
        assert block["kind"] == "block"
        assert (block["week"], block["day"]) == (FIXED_WEEK, "monday")
        assert (block["planned_start"], block["planned_end"]) == ("09:00", "10:30")
        assert block["actual_start"] is None
        assert block["description"] == "deep work"
        assert block["tags"] == ["project"]
        assert block["done"] is False

        assert ENTRY_REPO.get_entry(block["id"]) == block

    def test_explicit_tag_and_hashtags(self, clock):
        block = entry_service.add_block(
            "today", "14:00-15:00", "sync #Team", tag="Acme", clock=clock
        )
        assert block["tags"] == ["acme", "team"]
        assert TAG_REPO.get_all_tags() == ["acme", "team"]

    def test_next_week(self, clock):
        block = entry_service.add_block("+monday", "9:00-10:00", "plan", clock=clock)
        assert block["week"] == "2025-W08"

    def test_invalid_day_writes_nothing(self, clock):
        with pytest.raises(InvalidDay):
            entry_service.add_block("someday", "9:00-10:00", "x", clock=clock)
        assert ENTRY_REPO.get_all_entries() == []

    def test_invalid_time_writes_nothing(self, clock):
        with pytest.raises(InvalidTimeFormat):
            entry_service.add_block("monday", "9:5-10:00", "x", clock=clock)
        assert ENTRY_REPO.get_all_entries() == []


class TestAddNote:
    def test_creates_note(self, clock):
        note = entry_service.add_note("friday", "retro prep #team", clock=clock)

        assert note["kind"] == "note"
        assert note["day"] == "friday"
        assert note["description"] == "retro prep"
        assert note["tags"] == ["team"]
        assert "planned_start" not in note
        assert "actual_start" not in note

    def test_empty_text(self, clock):
        with pytest.raises(MissingArgument):
            entry_service.add_note("friday", "   ", clock=clock)
        assert ENTRY_REPO.get_all_entries() == []


class TestAddUnplanned:
    def test_created_done_with_actual_times(self, clock):
        unplanned = entry_service.add_unplanned(
            "today", "16:00-16:30", "fire drill", clock=clock
        )

        assert unplanned["kind"] == "unplanned"
        assert unplanned["done"] is True
        assert (unplanned["actual_start"], unplanned["actual_end"]) == (
            "16:00",
            "16:30",
        )
        assert "planned_start" not in unplanned

    def test_description_required(self, clock):
        with pytest.raises(MissingArgument):
            entry_service.add_unplanned("today", "16:00-16:30", "", clock=clock)
        assert ENTRY_REPO.get_all_entries() == []


class TestRecordActual:
    def test_records_actual_times(self, clock):
        block = entry_service.add_block("monday", "9:00-10:00", "x", clock=clock)

        assert entry_service.record_actual(block["id"], "9:15-10:45") == (
            "09:15",
            "10:45",
        )
        stored = entry_service.get_entry(block["id"])
        assert (stored["actual_start"], stored["actual_end"]) == ("09:15", "10:45")
        assert (stored["planned_start"], stored["planned_end"]) == ("09:00", "10:00")

    def test_unknown_id(self):
        with pytest.raises(NotFound, match="abcdef"):
            entry_service.record_actual("abcdef", "9:00-10:00")

    def test_invalid_range_checked_before_lookup(self):
        with pytest.raises(InvalidTimeFormat):
            entry_service.record_actual("abcdef", "9-10")

    def test_note_cannot_record_time(self, clock):
        note = entry_service.add_note("monday", "thoughts", clock=clock)
        with pytest.raises(NoteHasNoTimes):
            entry_service.record_actual(note["id"], "9:00-10:00")
        assert "actual_start" not in entry_service.get_entry(note["id"])


class TestDone:
    def test_toggle(self, clock):
        block = entry_service.add_block("monday", "9:00-10:00", "x", clock=clock)

        entry_service.mark_done(block["id"])
        assert entry_service.get_entry(block["id"])["done"] is True

        entry_service.mark_undone(block["id"])
        assert entry_service.get_entry(block["id"]) == block

    def test_unknown_id(self):
        with pytest.raises(NotFound):
            entry_service.mark_done("000000")
        with pytest.raises(NotFound):
            entry_service.mark_undone("000000")


class TestRemove:
    def test_remove(self, clock):
        block = entry_service.add_block("monday", "9:00-10:00", "x", clock=clock)
        entry_service.remove_entry(block["id"])

        with pytest.raises(NotFound):
            entry_service.get_entry(block["id"])

    def test_unknown_id_leaves_others_alone(self, clock):
        block = entry_service.add_block("monday", "9:00-10:00", "x", clock=clock)
        note = entry_service.add_note("monday", "y", clock=clock)
        before = ENTRY_REPO.get_all_entries()

        with pytest.raises(NotFound):
            entry_service.remove_entry("zzzzzz")

        assert ENTRY_REPO.get_all_entries() == before
        assert {entry["id"] for entry in before} == {block["id"], note["id"]}

    def test_removed_twice(self, clock):
        block = entry_service.add_block("monday", "9:00-10:00", "x", clock=clock)
        entry_service.remove_entry(block["id"])
        with pytest.raises(NotFound):
            entry_service.remove_entry(block["id"])
