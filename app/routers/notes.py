# app/routers/notes.py
"""Append-only notes on a booking."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.note import NoteCreate, NoteOut
from app.services import note_service

router = APIRouter()


@router.post("/bookings/{booking_id}/notes", response_model=NoteOut,
             status_code=status.HTTP_201_CREATED, summary="Add a note to a booking")
def add_note(booking_id: int, body: NoteCreate, db: Session = Depends(get_db)):
    return note_service.append(db, booking_id, body.note_text)


@router.get("/bookings/{booking_id}/notes", response_model=list[NoteOut],
            summary="Notes for a booking, oldest first")
def list_notes(booking_id: int, db: Session = Depends(get_db)):
    return note_service.list_for(db, booking_id)
