# app/services/errors.py
"""
Error taxonomy for the booking engine.

Every error carries the HTTP status it maps to at the API boundary and a
category telling the caller what to do about it:

    not_eligible  business rule denial, retrying will not help
    not_found     referenced user / cab / booking does not exist
    invalid       request conflicts with existing data
    fault         storage problem, safe to try again later

main.py renders all of them as {"detail", "error", "category"}.
"""


class BookingError(Exception):
    """Base class for every error raised by the booking services."""

    status_code = 500
    code = "booking_error"
    category = "fault"

    def __init__(self, message: str = None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    def default_message(self) -> str:
        return self.code.replace("_", " ").capitalize()

    def to_dict(self) -> dict:
        return {"detail": self.message, "error": self.code, "category": self.category}


# ── Eligibility ──────────────────────────────────────────────────────────────

class VehicleUnavailable(BookingError):
    status_code = 400
    code = "vehicle_unavailable"
    category = "not_eligible"


class SubscriptionExpired(BookingError):
    status_code = 403
    code = "subscription_expired"
    category = "not_eligible"


class QuotaExhausted(BookingError):
    status_code = 403
    code = "quota_exhausted"
    category = "not_eligible"


class InvalidStatusTransition(BookingError):
    status_code = 409
    code = "invalid_status_transition"
    category = "not_eligible"


# ── Not found ────────────────────────────────────────────────────────────────

class NotFound(BookingError):
    status_code = 404
    code = "not_found"
    category = "not_found"


class UserNotFound(NotFound):
    code = "user_not_found"


class CabNotFound(NotFound):
    code = "cab_not_found"


class BookingNotFound(NotFound):
    code = "booking_not_found"


class ReservationNotFound(BookingNotFound):
    """Raised when a note targets a booking that does not exist."""

    code = "reservation_not_found"


# ── Conflicts with existing data ─────────────────────────────────────────────

class DuplicateEmail(BookingError):
    status_code = 400
    code = "duplicate_email"
    category = "invalid"


class DuplicateLicensePlate(BookingError):
    status_code = 400
    code = "duplicate_license_plate"
    category = "invalid"


# ── Faults ───────────────────────────────────────────────────────────────────

class PersistenceFailure(BookingError):
    status_code = 500
    code = "persistence_failure"
    category = "fault"
