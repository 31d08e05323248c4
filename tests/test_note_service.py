# tests/test_note_service.py
"""Tests for the append-only annotation trail."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock, patch
from app.models.booking import BookingStatus
from app.services import booking_service, note_service
from app.services.errors import ReservationNotFound


@pytest.fixture
def booking(db, make_user, make_cab):
    return booking_service.create(db, make_user().id, make_cab().id, "Depot", "Airport")


class TestNoteService:
    def test_notes_come_back_in_append_order(self, db, booking):
        texts = ["Pickup at gate 3", "Passenger running late", "Two suitcases"]
        for text in texts:
            note_service.append(db, booking.id, text)

        notes = note_service.list_for(db, booking.id)
        assert [n.note_text for n in notes] == texts
        assert all(n.booking_id == booking.id for n in notes)

    def test_append_to_unknown_booking(self, db):
        with pytest.raises(ReservationNotFound):
            note_service.append(db, 999, "text")

    def test_unknown_booking_has_no_notes(self, db):
        assert note_service.list_for(db, 999) == []

    def test_notes_are_scoped_to_their_booking(self, db, booking, make_user, make_cab):
        other = booking_service.create(db, make_user().id, make_cab().id, "X", "Y")
        note_service.append(db, booking.id, "mine")
        note_service.append(db, other.id, "theirs")
        assert [n.note_text for n in note_service.list_for(db, booking.id)] == ["mine"]

    def test_append_works_on_terminal_booking(self, db, booking):
        booking_service.set_status(db, booking.id, BookingStatus.COMPLETED)
        note_service.append(db, booking.id, "Trip went fine")
        assert len(note_service.list_for(db, booking.id)) == 1

    def test_missing_booking_checked_before_insert(self):
        db = MagicMock()
        with patch("app.services.note_service.booking_service.exists", return_value=False):
            with pytest.raises(ReservationNotFound):
                note_service.append(db, 7, "text")
        db.add.assert_not_called()
