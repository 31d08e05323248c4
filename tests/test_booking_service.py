# tests/test_booking_service.py
"""Tests for the booking ledger (record store only — no cab/quota side effects)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from app.models.booking import Booking, BookingStatus
from app.models.cab import Cab, CabStatus
from app.models.note import Note
from app.models.user import User
from app.services import booking_service, note_service
from app.services.errors import BookingNotFound, InvalidStatusTransition


@pytest.fixture
def booking(db, make_user, make_cab):
    user = make_user(name="Aigerim")
    cab = make_cab(status=CabStatus.BOOKED)
    return booking_service.create(db, user.id, cab.id, "Depot", "Airport")


class TestCreateAndRead:
    def test_create_is_pending(self, booking):
        assert booking.id is not None
        assert booking.status == BookingStatus.PENDING
        assert booking.start_location == "Depot"
        assert booking.end_location == "Airport"

    def test_create_does_not_touch_cab_or_quota(self, db, make_user, make_cab, fetch):
        user = make_user(bookings_remaining=2)
        cab = make_cab()
        booking_service.create(db, user.id, cab.id, "A", "B")
        assert fetch(Cab, cab.id).status == CabStatus.AVAILABLE
        assert fetch(User, user.id).bookings_remaining == 2

    def test_get_includes_owner_and_notes(self, db, booking):
        note_service.append(db, booking.id, "Driver called")
        found = booking_service.get(db, booking.id)
        assert found.user.name == "Aigerim"
        assert [n.note_text for n in found.notes] == ["Driver called"]

    def test_get_unknown(self, db):
        with pytest.raises(BookingNotFound):
            booking_service.get(db, 999)

    def test_list_newest_first_with_owner(self, db, make_user, make_cab):
        user = make_user()
        first = booking_service.create(db, user.id, make_cab().id, "A", "B")
        second = booking_service.create(db, user.id, make_cab().id, "C", "D")
        result = booking_service.list_all(db)
        assert [b.id for b in result] == [second.id, first.id]
        assert result[0].user.email == user.email

    def test_list_filters(self, db, make_user, make_cab):
        alice, bob = make_user(), make_user()
        booking_service.create(db, alice.id, make_cab().id, "A", "B")
        mine = booking_service.create(db, bob.id, make_cab().id, "C", "D")
        assert [b.id for b in booking_service.list_all(db, user_id=bob.id)] == [mine.id]
        assert booking_service.list_all(db, status=BookingStatus.COMPLETED) == []
        assert len(booking_service.list_all(db, limit=1)) == 1


class TestDelete:
    def test_delete_removes_booking_and_notes(self, db, booking, fetch):
        booking_id = booking.id
        note_id = note_service.append(db, booking_id, "Bring a child seat").id
        removed = booking_service.delete(db, booking_id)

        assert removed.booking_id == booking_id
        assert removed.was_active
        assert fetch(Booking, booking_id) is None
        assert fetch(Note, note_id) is None

    def test_delete_unknown(self, db):
        with pytest.raises(BookingNotFound):
            booking_service.delete(db, 999)

    def test_deleted_terminal_booking_is_not_active(self, db, booking):
        booking_service.set_status(db, booking.id, BookingStatus.COMPLETED)
        assert not booking_service.delete(db, booking.id).was_active


class TestStatusTransitions:
    @pytest.mark.parametrize("target", [BookingStatus.COMPLETED, BookingStatus.CANCELLED])
    def test_pending_to_terminal(self, db, booking, target):
        assert booking_service.set_status(db, booking.id, target).status == target

    def test_terminal_state_is_final(self, db, booking):
        booking_service.set_status(db, booking.id, BookingStatus.CANCELLED)
        with pytest.raises(InvalidStatusTransition):
            booking_service.set_status(db, booking.id, BookingStatus.COMPLETED)

    def test_cannot_move_back_to_pending(self, db, booking):
        with pytest.raises(InvalidStatusTransition):
            booking_service.set_status(db, booking.id, BookingStatus.PENDING)

    def test_unknown_booking(self, db):
        with pytest.raises(BookingNotFound):
            booking_service.set_status(db, 999, BookingStatus.COMPLETED)

    def test_apply_status_returns_cab_and_waits_for_commit(self, db, booking, fetch):
        booking_id, cab_id = booking.id, booking.cab_id
        assert booking_service.apply_status(db, booking_id, BookingStatus.COMPLETED) == cab_id
        db.rollback()
        assert fetch(Booking, booking_id).status == BookingStatus.PENDING
