# app/services/booking_service.py
"""
Reservation ledger — the authoritative store of bookings.

This module only records bookings; it never touches cabs or entitlements.
Claiming the cab and spending the user's quota before create(), and
releasing the cab alongside remove() or apply_status(), is
reservation_service's job. Those two leave the commit to the caller.
"""

from dataclasses import dataclass
from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload
from app.config import settings
from app.database import atomic
from app.models.booking import Booking, BookingStatus
from app.services.errors import BookingNotFound, InvalidStatusTransition
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DeletedBooking:
    """What is left of a booking after it has been hard-deleted."""
    booking_id: int
    user_id: int
    cab_id: int
    status: str

    @property
    def was_active(self) -> bool:
        return self.status not in BookingStatus.TERMINAL


def create(db: Session, user_id: int, cab_id: int, start_location: str, end_location: str) -> Booking:
    booking = Booking(
        user_id=user_id,
        cab_id=cab_id,
        start_location=start_location,
        end_location=end_location,
        status=BookingStatus.PENDING,
    )
    with atomic(db, "create booking"):
        db.add(booking)
    db.refresh(booking)
    logger.info(f"[BOOKING] Created booking {booking.id} user={user_id} cab={cab_id}")
    return booking


def get(db: Session, booking_id: int) -> Booking:
    """Fetch one booking with its owner and notes loaded."""
    booking = (
        db.query(Booking)
        .options(joinedload(Booking.user), joinedload(Booking.notes))
        .filter(Booking.id == booking_id)
        .first()
    )
    if not booking:
        raise BookingNotFound(f"Booking {booking_id} not found")
    return booking


def exists(db: Session, booking_id: int) -> bool:
    return db.query(Booking.id).filter(Booking.id == booking_id).first() is not None


def list_all(db: Session, user_id: int = None, status: str = None, limit: int = None):
    """All bookings, newest first, with owner loaded."""
    q = db.query(Booking).options(joinedload(Booking.user))
    if user_id is not None:
        q = q.filter(Booking.user_id == user_id)
    if status:
        q = q.filter(Booking.status == status)
    return q.order_by(Booking.id.desc()).limit(limit or settings.BOOKING_LIST_LIMIT).all()


def remove(db: Session, booking_id: int) -> DeletedBooking:
    """Delete a booking and its notes inside the caller's transaction."""
    booking = (
        db.query(Booking)
        .filter(Booking.id == booking_id)
        .with_for_update()
        .first()
    )
    if not booking:
        raise BookingNotFound(f"Booking {booking_id} not found")
    removed = DeletedBooking(
        booking_id=booking.id,
        user_id=booking.user_id,
        cab_id=booking.cab_id,
        status=booking.status,
    )
    db.delete(booking)   # notes cascade
    db.flush()
    return removed


def delete(db: Session, booking_id: int) -> DeletedBooking:
    """Hard-delete a booking and its notes. Returns the removed row's keys and status."""
    with atomic(db, f"delete booking {booking_id}"):
        removed = remove(db, booking_id)
    logger.info(f"[BOOKING] Deleted booking {booking_id} (was {removed.status})")
    return removed


def apply_status(db: Session, booking_id: int, new_status: str) -> int:
    """
    Move a Pending booking to Completed or Cancelled inside the caller's
    transaction. Terminal states are final. Returns the booking's cab id.
    """
    if new_status not in BookingStatus.TERMINAL:
        raise InvalidStatusTransition(f"Cannot move booking {booking_id} to {new_status}")

    result = db.execute(
        update(Booking)
        .where(Booking.id == booking_id, Booking.status == BookingStatus.PENDING)
        .values(status=new_status)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        current = db.query(Booking.status).filter(Booking.id == booking_id).scalar()
        if current is None:
            raise BookingNotFound(f"Booking {booking_id} not found")
        raise InvalidStatusTransition(
            f"Booking {booking_id} is {current}; only Pending bookings can change status"
        )
    return db.query(Booking.cab_id).filter(Booking.id == booking_id).scalar()


def set_status(db: Session, booking_id: int, new_status: str) -> Booking:
    """Move a Pending booking to Completed or Cancelled and commit."""
    with atomic(db, f"update booking {booking_id}"):
        apply_status(db, booking_id, new_status)

    logger.info(f"[BOOKING] Booking {booking_id} -> {new_status}")
    return get(db, booking_id)
