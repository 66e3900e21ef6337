"""Value Object Occupancy - adults and children sharing one room."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Occupancy:
    adults: int
    children: int = 0

    def __post_init__(self) -> None:
        if self.adults < 1:
            raise ValueError(f"adults must be >= 1: {self.adults}")
        if self.children < 0:
            raise ValueError(f"children cannot be negative: {self.children}")

    @property
    def total(self) -> int:
        return self.adults + self.children
