"""Value Objects of the booking domain."""

from resort_booking.domain.value_objects.money import Money
from resort_booking.domain.value_objects.occupancy import Occupancy
from resort_booking.domain.value_objects.stay_range import StayRange

__all__ = [
    "Money",
    "Occupancy",
    "StayRange",
]
