# app/services/entitlement_service.py
"""
Entitlement ledger: subscription validity + remaining-bookings quota per user.

try_consume() checks eligibility and takes one unit in the same UPDATE, so two
concurrent requests can never both spend the last unit and the counter never
drops below zero. restore() gives a unit back; the reservation saga calls it
when a booking cannot be written after the unit was taken.
"""

import enum
from datetime import datetime
from sqlalchemy import update
from sqlalchemy.orm import Session
from app.database import atomic
from app.models.user import User
from app.services.errors import UserNotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ConsumeResult(enum.Enum):
    GRANTED = "granted"
    SUBSCRIPTION_EXPIRED = "subscription_expired"
    QUOTA_EXHAUSTED = "quota_exhausted"
    USER_NOT_FOUND = "user_not_found"


def is_subscription_active(end_date, now: datetime = None) -> bool:
    """A missing end date means the user never subscribed."""
    if end_date is None:
        return False
    return end_date > (now or datetime.utcnow())


def _classify_denial(user, now: datetime) -> ConsumeResult:
    if user is None:
        return ConsumeResult.USER_NOT_FOUND
    if not is_subscription_active(user.subscription_end_date, now):
        return ConsumeResult.SUBSCRIPTION_EXPIRED
    return ConsumeResult.QUOTA_EXHAUSTED


def try_consume(db: Session, user_id: int) -> ConsumeResult:
    """Take one booking unit from the user if the subscription is live and quota remains."""
    now = datetime.utcnow()
    with atomic(db, f"consume entitlement for user {user_id}"):
        result = db.execute(
            update(User)
            .where(
                User.id == user_id,
                User.bookings_remaining > 0,
                User.subscription_end_date.is_not(None),
                User.subscription_end_date > now,
            )
            .values(bookings_remaining=User.bookings_remaining - 1, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            outcome = ConsumeResult.GRANTED
        else:
            user = (
                db.query(User.id, User.subscription_end_date)
                .filter(User.id == user_id)
                .first()
            )
            outcome = _classify_denial(user, now)

    if outcome is ConsumeResult.GRANTED:
        logger.info(f"[ENTITLEMENT] Consumed 1 booking unit for user {user_id}")
    else:
        logger.warning(f"[ENTITLEMENT] Denied for user {user_id}: {outcome.value}")
    return outcome


def restore(db: Session, user_id: int):
    """Give one booking unit back to the user."""
    with atomic(db, f"restore entitlement for user {user_id}"):
        result = db.execute(
            update(User)
            .where(User.id == user_id)
            .values(bookings_remaining=User.bookings_remaining + 1, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise UserNotFound(f"User {user_id} not found")
    logger.info(f"[ENTITLEMENT] Restored 1 booking unit for user {user_id}")
