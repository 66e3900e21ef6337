"""Value Object StayRange - half-open check-in/check-out interval."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StayRange:
    """
    Immutable half-open date interval ``[check_in, check_out)``.

    The guest occupies the room on every night starting at ``check_in`` and
    leaves on ``check_out``, so a stay ending on a given date does not
    collide with another stay starting that same date.

    Attributes:
        check_in: First night of the stay.
        check_out: Departure date (excluded).
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_in >= self.check_out:
            raise ValueError(
                f"check_in must be before check_out: {self.check_in} >= {self.check_out}"
            )

    @property
    def nights(self) -> int:
        """Number of whole nights in the stay (always >= 1)."""
        return (self.check_out - self.check_in).days

    def overlaps_with(self, other: "StayRange") -> bool:
        """Standard half-open overlap: touching endpoints do not overlap."""
        return self.check_in < other.check_out and other.check_in < self.check_out

    def contains(self, night: date) -> bool:
        """Whether ``night`` is one of the nights of the stay."""
        return self.check_in <= night < self.check_out

    def __str__(self) -> str:
        return f"{self.check_in.isoformat()} -> {self.check_out.isoformat()}"
