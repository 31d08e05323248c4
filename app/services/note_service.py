# app/services/note_service.py
"""Annotation trail: append-only notes per booking. No edit or delete exists."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.database import atomic
from app.models.note import Note
from app.services import booking_service
from app.services.errors import ReservationNotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)


def append(db: Session, booking_id: int, text: str) -> Note:
    if not booking_service.exists(db, booking_id):
        raise ReservationNotFound(f"Booking {booking_id} not found")

    note = Note(booking_id=booking_id, note_text=text)
    with atomic(db, f"add note to booking {booking_id}"):
        db.add(note)
        try:
            db.flush()
        except IntegrityError:
            # booking deleted between the check and the insert
            raise ReservationNotFound(f"Booking {booking_id} not found")
    db.refresh(note)
    logger.info(f"[NOTE] Note {note.id} added to booking {booking_id}")
    return note


def list_for(db: Session, booking_id: int):
    """Notes in the order they were written. Unknown bookings have no notes."""
    return db.query(Note).filter(Note.booking_id == booking_id).order_by(Note.id).all()
