# app/services/user_service.py
"""
User registration and lookup.
Passwords are stored as bcrypt hashes; verifying them (login) lives outside this service.
"""

from datetime import timezone
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.config import settings
from app.database import atomic
from app.models.user import User, UserRole
from app.services.errors import DuplicateEmail, UserNotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def to_naive_utc(value):
    """Expiry dates are stored as naive UTC; shift offset-aware input before dropping tzinfo."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def register_user(db: Session, name: str, email: str, password: str, phone_number: str = None,
                  role: str = UserRole.USER, subscription_end_date=None,
                  bookings_remaining: int = None) -> User:
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        phone_number=phone_number,
        role=role,
        subscription_end_date=to_naive_utc(subscription_end_date),
        bookings_remaining=(settings.DEFAULT_BOOKINGS_REMAINING
                            if bookings_remaining is None else bookings_remaining),
    )
    with atomic(db, "register user"):
        db.add(user)
        try:
            db.flush()
        except IntegrityError:
            raise DuplicateEmail(f"Email {email} already registered")
    db.refresh(user)
    logger.info(f"[USER] Registered user {user.id} ({email})")
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise UserNotFound(f"User {user_id} not found")
    return user


def list_users(db: Session):
    return db.query(User).order_by(User.id).all()
