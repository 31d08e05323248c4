# app/schemas/user.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional


class UserCreate(BaseModel):
    # PascalCase aliases keep older clients (Name, Email, PasswordHash, ...) working
    name: str = Field(min_length=1, max_length=200, alias="Name")
    email: str = Field(min_length=3, max_length=255, alias="Email")
    password: str = Field(min_length=1, alias="PasswordHash")
    phone_number: Optional[str] = Field(default=None, alias="PhoneNumber")
    role: Literal["User", "Admin"] = Field(default="User", alias="Role")
    subscription_end_date: Optional[datetime] = Field(default=None, alias="SubscriptionEndDate")
    bookings_remaining: Optional[int] = Field(default=None, ge=0, alias="BookingsRemaining")

    class Config:
        populate_by_name = True


class UserPublicOut(BaseModel):
    """Owner fields safe to embed in booking responses."""
    name: str
    email: str

    class Config:
        from_attributes = True


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    phone_number: Optional[str]
    role: str
    subscription_end_date: Optional[datetime]
    bookings_remaining: int
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
