# app/models/user.py
"""
Users table — identity plus the booking entitlement (subscription window + quota).
bookings_remaining is only ever changed by entitlement_service.
"""

from datetime import datetime
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class UserRole:
    USER = "User"
    ADMIN = "Admin"

    ALL = (USER, ADMIN)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(50))
    role = Column(String(20), nullable=False, default=UserRole.USER)   # User | Admin
    subscription_end_date = Column(DateTime)                           # NULL = no active subscription
    bookings_remaining = Column(Integer, nullable=False, default=100)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    bookings = relationship("Booking", back_populates="user")

    __table_args__ = (
        CheckConstraint("bookings_remaining >= 0", name="ck_users_bookings_remaining_non_negative"),
    )

    def __repr__(self):
        return f"<User {self.id} email={self.email} remaining={self.bookings_remaining}>"
