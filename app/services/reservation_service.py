# app/services/reservation_service.py
"""
Reservation orchestrator — ties the cab register, the entitlement ledger and
the booking ledger together.

reserve() runs as a saga: every step commits on its own, and when a later
step fails the earlier ones are undone in reverse order before the error is
raised:

    1. claim cab           undo: release cab
    2. consume entitlement undo: restore entitlement
    3. create booking

The cab is claimed first because cabs are the contended resource; a request
for a taken cab is rejected before the user's quota is touched.

An undo step that fails is logged as CRITICAL and raised as PersistenceFailure.

cancel() and transition() are not sagas: the booking change and the cab
release share one transaction, so either both land or neither does.
"""

from sqlalchemy.orm import Session
from app.config import settings
from app.database import atomic
from app.models.booking import Booking
from app.services import booking_service, cab_service, entitlement_service
from app.services.booking_service import DeletedBooking
from app.services.cab_service import ClaimResult
from app.services.entitlement_service import ConsumeResult
from app.services.errors import (
    BookingError,
    PersistenceFailure,
    QuotaExhausted,
    SubscriptionExpired,
    UserNotFound,
    VehicleUnavailable,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)

DENIALS = {
    ConsumeResult.SUBSCRIPTION_EXPIRED: (SubscriptionExpired, "Subscription expired for user {user_id}"),
    ConsumeResult.QUOTA_EXHAUSTED: (QuotaExhausted, "Booking limit reached for user {user_id}"),
    ConsumeResult.USER_NOT_FOUND: (UserNotFound, "User {user_id} not found"),
}


def _compensate(db: Session, steps):
    """
    Run undo steps in the given order. Every step is attempted even if an
    earlier one fails; any failure is escalated once all have run.
    """
    failed = []
    for name, action in steps:
        try:
            action()
        except BookingError as e:
            logger.critical(f"[SAGA] Compensation '{name}' failed: {e}", exc_info=True)
            failed.append(name)
    if failed:
        raise PersistenceFailure(f"Compensation failed ({', '.join(failed)}); state needs repair")


def reserve(db: Session, user_id: int, cab_id: int, start_location: str, end_location: str) -> Booking:
    """Claim the cab, spend one booking unit and record the booking."""
    release_cab = ("release cab", lambda: cab_service.release(db, cab_id))
    restore_unit = ("restore entitlement", lambda: entitlement_service.restore(db, user_id))

    # Step 1: cab
    claim = cab_service.try_claim(db, cab_id)
    if claim is not ClaimResult.CLAIMED:
        reason = "does not exist" if claim is ClaimResult.NOT_FOUND else "is not available"
        raise VehicleUnavailable(f"Cab {cab_id} {reason}")

    # Step 2: entitlement
    try:
        grant = entitlement_service.try_consume(db, user_id)
    except PersistenceFailure:
        _compensate(db, [release_cab])
        raise

    if grant is not ConsumeResult.GRANTED:
        _compensate(db, [release_cab])
        error_cls, message = DENIALS[grant]
        raise error_cls(message.format(user_id=user_id))

    # Step 3: record
    try:
        booking = booking_service.create(db, user_id, cab_id, start_location, end_location)
    except PersistenceFailure as e:
        logger.error(f"[SAGA] Booking write failed for user={user_id} cab={cab_id}: {e}")
        _compensate(db, [restore_unit, release_cab])
        raise PersistenceFailure(f"Could not create booking for cab {cab_id}") from e

    logger.info(f"[SAGA] Reserved cab {cab_id} for user {user_id} -> booking {booking.id}")
    return booking


def cancel(db: Session, booking_id: int) -> DeletedBooking:
    """
    Hard-delete a booking and free its cab in one transaction.
    The spent booking unit is kept unless REFUND_ON_DELETE is enabled.
    """
    with atomic(db, f"delete booking {booking_id}"):
        removed = booking_service.remove(db, booking_id)
        # a terminal booking gave its cab back when it left Pending
        if removed.was_active:
            cab_service.mark_available(db, removed.cab_id)
    logger.info(f"[SAGA] Deleted booking {booking_id} (was {removed.status})")

    if removed.was_active and settings.REFUND_ON_DELETE:
        try:
            entitlement_service.restore(db, removed.user_id)
        except UserNotFound:
            logger.warning(f"[SAGA] No user {removed.user_id} to refund for booking {booking_id}")
    return removed


def transition(db: Session, booking_id: int, new_status: str) -> Booking:
    """
    Complete or cancel a Pending booking and free its cab.

    Both rows change in one transaction: a booking never becomes terminal
    while its cab stays Booked.
    """
    with atomic(db, f"move booking {booking_id} to {new_status}"):
        cab_id = booking_service.apply_status(db, booking_id, new_status)
        cab_service.mark_available(db, cab_id)
    logger.info(f"[SAGA] Booking {booking_id} -> {new_status}, cab {cab_id} released")
    return booking_service.get(db, booking_id)
