# app/schemas/cab.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class CabCreate(BaseModel):
    cab_name: str = Field(min_length=1, max_length=200, alias="CabName")
    license_plate: str = Field(min_length=1, max_length=50, alias="LicensePlate")
    capacity: int = Field(gt=0, alias="Capacity")

    class Config:
        populate_by_name = True


class CabOut(BaseModel):
    id: int
    cab_name: str
    license_plate: str
    capacity: int
    status: str          # Available | Booked
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
