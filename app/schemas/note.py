# app/schemas/note.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class NoteCreate(BaseModel):
    note_text: str = Field(min_length=1, alias="NoteText")

    class Config:
        populate_by_name = True


class NoteOut(BaseModel):
    id: int
    booking_id: int
    note_text: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
