# app/models/cab.py
"""
Cabs table — the fleet.
status is flipped Available -> Booked only by cab_service.try_claim and back by cab_service.release.
"""

from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String
from app.database import Base


class CabStatus:
    AVAILABLE = "Available"
    BOOKED = "Booked"


class Cab(Base):
    __tablename__ = "cabs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cab_name = Column(String(200), nullable=False)
    license_plate = Column(String(50), unique=True, nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=CabStatus.AVAILABLE, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Cab {self.id} plate={self.license_plate} status={self.status}>"
