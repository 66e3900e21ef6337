"""
Range & guest validation.

Every helper here either returns a normalized value or raises
``ValidationError``; none of them touches the datastore, so use cases call
them before opening a unit of work.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from resort_booking.domain.entities.reservation import GuestDetails
from resort_booking.domain.errors import AuthRequiredError, InvalidDateRangeError, ValidationError
from resort_booking.domain.value_objects.occupancy import Occupancy
from resort_booking.domain.value_objects.stay_range import StayRange

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 30
NOTES_MAX_LENGTH = 400
ATTENDEE_FIRST_NAME_MAX_LENGTH = 60
ATTENDEE_LAST_NAME_MAX_LENGTH = 80


@dataclass(frozen=True)
class PartyDetails:
    first_name: str
    last_name: str
    party_size: int


def parse_calendar_date(value: Any, field: str) -> date:
    """Accept a ``date`` or a strict ``YYYY-MM-DD`` string; reject anything with a time."""
    if isinstance(value, datetime):
        raise ValidationError(field, "must be a calendar date without a time component")
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE.match(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise ValidationError(field, "must be a date in YYYY-MM-DD format")


def _coerce_int(value: Any, field: str) -> int:
    # bool is an int subclass; True guests is not a count
    if isinstance(value, bool):
        raise ValidationError(field, "must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(field, "must be an integer")


def validate_stay(date_from: Any, date_to: Any, today: date) -> StayRange:
    """
    Normalize a requested stay.

    Args:
        date_from: Check-in date (``date`` or ``YYYY-MM-DD``).
        date_to: Check-out date (``date`` or ``YYYY-MM-DD``).
        today: Start of the current local day; earlier check-ins are refused.

    Returns:
        StayRange with at least one night.
    """
    check_in = parse_calendar_date(date_from, "date_from")
    check_out = parse_calendar_date(date_to, "date_to")
    if check_in < today:
        raise InvalidDateRangeError("date_from", "cannot be in the past")
    if check_out <= check_in:
        raise InvalidDateRangeError("date_to", "must be after date_from")
    return StayRange(check_in=check_in, check_out=check_out)


def validate_guests(guests: Any) -> int:
    count = _coerce_int(guests, "guests")
    if count < 1:
        raise ValidationError("guests", "must be at least 1")
    return count


def validate_occupancy(adults: Any, children: Any = 0) -> Occupancy:
    adult_count = _coerce_int(adults, "adults")
    child_count = _coerce_int(0 if children is None else children, "children")
    if adult_count < 1:
        raise ValidationError("adults", "must be at least 1")
    if child_count < 0:
        raise ValidationError("children", "cannot be negative")
    return Occupancy(adults=adult_count, children=child_count)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def clean_guest_details(
    first_name: str | None,
    last_name: str | None,
    phone: str | None = None,
    notes: str | None = None,
) -> GuestDetails:
    first = _clean(first_name)
    last = _clean(last_name)
    phone_value = _clean(phone)
    notes_value = _clean(notes)

    for field, value in (("first_name", first), ("last_name", last)):
        if len(value) < NAME_MIN_LENGTH:
            raise ValidationError(field, f"must have at least {NAME_MIN_LENGTH} characters")
        if len(value) > NAME_MAX_LENGTH:
            raise ValidationError(field, f"must have at most {NAME_MAX_LENGTH} characters")
    if len(phone_value) > PHONE_MAX_LENGTH:
        raise ValidationError("phone", f"must have at most {PHONE_MAX_LENGTH} characters")
    if len(notes_value) > NOTES_MAX_LENGTH:
        raise ValidationError("notes", f"must have at most {NOTES_MAX_LENGTH} characters")

    return GuestDetails(first_name=first, last_name=last, phone=phone_value, notes=notes_value)


def validate_party(first_name: str | None, last_name: str | None, party_size: Any) -> PartyDetails:
    first = _clean(first_name)
    last = _clean(last_name)
    if not first:
        raise ValidationError("first_name", "is required")
    if not last:
        raise ValidationError("last_name", "is required")
    if len(first) > ATTENDEE_FIRST_NAME_MAX_LENGTH:
        raise ValidationError(
            "first_name", f"must have at most {ATTENDEE_FIRST_NAME_MAX_LENGTH} characters"
        )
    if len(last) > ATTENDEE_LAST_NAME_MAX_LENGTH:
        raise ValidationError(
            "last_name", f"must have at most {ATTENDEE_LAST_NAME_MAX_LENGTH} characters"
        )
    size = _coerce_int(party_size, "party_size")
    if size < 1:
        raise ValidationError("party_size", "must be at least 1")
    return PartyDetails(first_name=first, last_name=last, party_size=size)


def require_user(user_id: int | None) -> int:
    """The authenticated identity, forwarded by the auth collaborator."""
    if user_id is None or isinstance(user_id, bool) or user_id < 1:
        raise AuthRequiredError()
    return user_id


def validate_identifier(value: Any, field: str) -> int:
    identifier = _coerce_int(value, field)
    if identifier < 1:
        raise ValidationError(field, "must be a positive integer")
    return identifier
