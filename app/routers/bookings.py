# app/routers/bookings.py
"""
Booking endpoints.
POST   /bookings              — reserve a cab (claim cab, spend quota, record booking)
GET    /bookings              — list bookings with owner name/email
GET    /bookings/{id}         — one booking with owner and notes
PUT    /bookings/{id}/status  — complete or cancel a pending booking
DELETE /bookings/{id}         — hard delete, frees the cab
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Literal, Optional
from app.database import get_db
from app.schemas.booking import BookingCreate, BookingDetailOut, BookingOut, BookingStatusUpdate
from app.services import booking_service, reservation_service

router = APIRouter()


@router.post("/bookings", response_model=BookingOut, status_code=status.HTTP_201_CREATED,
             summary="Reserve a cab")
def create_booking(body: BookingCreate, db: Session = Depends(get_db)):
    """
    400 if the cab is taken or unknown, 403 if the subscription expired or the
    booking limit is reached, 404 if the user does not exist.
    """
    return reservation_service.reserve(
        db, body.user_id, body.cab_id, body.start_location, body.end_location
    )


@router.get("/bookings", response_model=list[BookingOut], summary="List bookings")
def list_bookings(user_id: Optional[int] = None,
                  booking_status: Optional[Literal["Pending", "Completed", "Cancelled"]] = None,
                  limit: Optional[int] = None, db: Session = Depends(get_db)):
    return booking_service.list_all(db, user_id=user_id, status=booking_status, limit=limit)


@router.get("/bookings/{booking_id}", response_model=BookingDetailOut)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    return booking_service.get(db, booking_id)


@router.put("/bookings/{booking_id}/status", response_model=BookingOut,
            summary="Complete or cancel a pending booking")
def update_booking_status(booking_id: int, body: BookingStatusUpdate, db: Session = Depends(get_db)):
    return reservation_service.transition(db, booking_id, body.status)


@router.delete("/bookings/{booking_id}", summary="Delete a booking")
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    removed = reservation_service.cancel(db, booking_id)
    return {"status": "deleted", "booking_id": removed.booking_id, "cab_id": removed.cab_id}
