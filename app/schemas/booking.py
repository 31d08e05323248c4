# app/schemas/booking.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional
from app.schemas.note import NoteOut
from app.schemas.user import UserPublicOut


class BookingCreate(BaseModel):
    user_id: int = Field(gt=0, alias="UserID")
    cab_id: int = Field(gt=0, alias="CabID")
    start_location: str = Field(min_length=1, max_length=255, alias="StartLocation")
    end_location: str = Field(min_length=1, max_length=255, alias="EndLocation")

    class Config:
        populate_by_name = True


class BookingStatusUpdate(BaseModel):
    status: Literal["Completed", "Cancelled"] = Field(alias="Status")

    class Config:
        populate_by_name = True


class BookingOut(BaseModel):
    id: int
    user_id: int
    cab_id: int
    start_location: str
    end_location: str
    status: str          # Pending | Completed | Cancelled
    created_at: Optional[datetime]
    user: Optional[UserPublicOut] = None

    class Config:
        from_attributes = True


class BookingDetailOut(BookingOut):
    notes: list[NoteOut] = []
