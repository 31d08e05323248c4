# app/routers/cabs.py
"""Fleet management — register and inspect cabs."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Literal, Optional
from app.database import get_db
from app.schemas.cab import CabCreate, CabOut
from app.services import cab_service

router = APIRouter()


@router.post("/cabs", response_model=CabOut, status_code=status.HTTP_201_CREATED,
             summary="Register a cab")
def register_cab(body: CabCreate, db: Session = Depends(get_db)):
    """License plates are unique; a duplicate is rejected with 400."""
    return cab_service.create_cab(db, body.cab_name, body.license_plate, body.capacity)


@router.get("/cabs", response_model=list[CabOut], summary="List cabs — filterable by status")
def list_cabs(cab_status: Optional[Literal["Available", "Booked"]] = None,
              db: Session = Depends(get_db)):
    return cab_service.list_cabs(db, status=cab_status)


@router.get("/cabs/{cab_id}", response_model=CabOut)
def get_cab(cab_id: int, db: Session = Depends(get_db)):
    return cab_service.get_cab(db, cab_id)
