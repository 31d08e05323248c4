# app/routers/users.py
"""User registration and entitlement lookup."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import UserCreate, UserOut
from app.services import user_service

router = APIRouter()


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED,
             summary="Register a user")
def register_user(body: UserCreate, db: Session = Depends(get_db)):
    return user_service.register_user(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        phone_number=body.phone_number,
        role=body.role,
        subscription_end_date=body.subscription_end_date,
        bookings_remaining=body.bookings_remaining,
    )


@router.get("/users", response_model=list[UserOut], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/users/{user_id}", response_model=UserOut, summary="User with remaining bookings")
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)
