# app/models/booking.py
"""
Bookings table — one row per reservation.
Rows are hard-deleted by the admin delete; notes go with them (cascade).
"""

from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class BookingStatus:
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    TERMINAL = (COMPLETED, CANCELLED)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    cab_id = Column(Integer, ForeignKey("cabs.id"), nullable=False, index=True)
    start_location = Column(String(255), nullable=False)
    end_location = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="bookings")
    notes = relationship(
        "Note",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="Note.id",
    )

    def __repr__(self):
        return f"<Booking {self.id} user={self.user_id} cab={self.cab_id} status={self.status}>"
