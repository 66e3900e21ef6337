"""Domain exceptions for the booking engine."""


class DomainError(Exception):
    """Base class for every domain error."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Validation errors ===


class ValidationError(DomainError):
    """Malformed or out-of-policy input."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed for '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class InvalidDateRangeError(ValidationError):
    """The requested stay dates are not a usable range."""

    def __init__(self, field: str, message: str):
        super().__init__(field=field, message=message)
        self.code = "INVALID_DATE_RANGE"


# === Not found errors ===


class NotFoundError(DomainError):
    """A referenced resource does not exist or is inactive."""


class RoomTypeNotFoundError(NotFoundError):
    def __init__(self, room_type: str):
        super().__init__(
            message=f"Room type not found: {room_type}",
            code="ROOM_TYPE_NOT_FOUND",
        )
        self.room_type = room_type


class EventSlotNotFoundError(NotFoundError):
    def __init__(self, event_id: int, slot_id: int):
        super().__init__(
            message=f"Slot {slot_id} not found for event {event_id}",
            code="EVENT_SLOT_NOT_FOUND",
        )
        self.event_id = event_id
        self.slot_id = slot_id


# === Capacity conflicts ===


class CapacityConflictError(DomainError):
    """The allocation cannot be satisfied at commit time."""

    def __init__(self, message: str, code: str, available: int | None = None):
        super().__init__(message=message, code=code)
        self.available = available


class NoRoomAvailableError(CapacityConflictError):
    """Every eligible room of the type is taken for the requested stay."""

    def __init__(self, room_type: str, check_in: str, check_out: str):
        super().__init__(
            message=f"No {room_type} room is free between {check_in} and {check_out}",
            code="NO_ROOM_AVAILABLE",
            available=0,
        )
        self.room_type = room_type


class InsufficientSeatsError(CapacityConflictError):
    """The slot has fewer remaining seats than the party needs."""

    def __init__(self, slot_id: int, requested: int, remaining: int):
        super().__init__(
            message=f"Not enough seats in slot {slot_id}: requested {requested}, remaining {remaining}",
            code="INSUFFICIENT_SEATS",
            available=remaining,
        )
        self.slot_id = slot_id
        self.requested = requested
        self.remaining = remaining


# === Identity ===


class AuthRequiredError(DomainError):
    def __init__(self):
        super().__init__(
            message="Authentication required",
            code="AUTH_REQUIRED",
        )


# === Infrastructure ===


class InfrastructureError(DomainError):
    """
    The datastore failed or aborted the unit of work.

    Raised only after the transaction was rolled back, so nothing was applied.
    ``transient`` marks failures (deadlock, lock timeout, serialization
    failure) that a caller may retry as-is.
    """

    def __init__(self, message: str, transient: bool = False):
        super().__init__(message=message, code="INFRASTRUCTURE_ERROR")
        self.transient = transient
