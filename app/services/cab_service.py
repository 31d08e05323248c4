# app/services/cab_service.py
"""
Cab availability register + fleet management helpers.

try_claim() and mark_available() are the only code paths that change
Cab.status; release() is mark_available() in its own transaction. Both are
single UPDATE statements so concurrent requests for the same cab are
serialised by the database, never by a read followed by a write.
"""

import enum
from datetime import datetime
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.database import atomic
from app.models.cab import Cab, CabStatus
from app.services.errors import CabNotFound, DuplicateLicensePlate
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ClaimResult(enum.Enum):
    CLAIMED = "claimed"
    NOT_AVAILABLE = "not_available"
    NOT_FOUND = "not_found"


def try_claim(db: Session, cab_id: int) -> ClaimResult:
    """Flip a cab Available -> Booked. At most one concurrent caller gets CLAIMED."""
    with atomic(db, f"claim cab {cab_id}"):
        result = db.execute(
            update(Cab)
            .where(Cab.id == cab_id, Cab.status == CabStatus.AVAILABLE)
            .values(status=CabStatus.BOOKED, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            claim = ClaimResult.CLAIMED
        elif db.query(Cab.id).filter(Cab.id == cab_id).first() is None:
            claim = ClaimResult.NOT_FOUND
        else:
            claim = ClaimResult.NOT_AVAILABLE

    if claim is ClaimResult.CLAIMED:
        logger.info(f"[CAB] Claimed cab {cab_id}")
    else:
        logger.warning(f"[CAB] Claim denied for cab {cab_id}: {claim.value}")
    return claim


def mark_available(db: Session, cab_id: int) -> bool:
    """Queue the release of a cab in the caller's transaction. Returns whether the cab changed."""
    result = db.execute(
        update(Cab)
        .where(Cab.id == cab_id, Cab.status != CabStatus.AVAILABLE)
        .values(status=CabStatus.AVAILABLE, updated_at=datetime.utcnow())
        .execution_options(synchronize_session=False)
    )
    return bool(result.rowcount)


def release(db: Session, cab_id: int):
    """Put a cab back to Available. Releasing an available or unknown cab is a no-op."""
    with atomic(db, f"release cab {cab_id}"):
        changed = mark_available(db, cab_id)
    if changed:
        logger.info(f"[CAB] Released cab {cab_id}")
    else:
        logger.debug(f"[CAB] Release of cab {cab_id} changed nothing")


def create_cab(db: Session, cab_name: str, license_plate: str, capacity: int) -> Cab:
    cab = Cab(
        cab_name=cab_name,
        license_plate=license_plate,
        capacity=capacity,
        status=CabStatus.AVAILABLE,
    )
    with atomic(db, "register cab"):
        db.add(cab)
        try:
            db.flush()
        except IntegrityError:
            raise DuplicateLicensePlate(f"License plate {license_plate} already registered")
    db.refresh(cab)
    logger.info(f"[CAB] Registered cab {cab.id} plate={license_plate}")
    return cab


def get_cab(db: Session, cab_id: int) -> Cab:
    cab = db.get(Cab, cab_id)
    if not cab:
        raise CabNotFound(f"Cab {cab_id} not found")
    return cab


def list_cabs(db: Session, status: str = None):
    q = db.query(Cab)
    if status:
        q = q.filter(Cab.status == status)
    return q.order_by(Cab.id).all()
