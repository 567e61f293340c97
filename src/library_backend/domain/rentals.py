"""Domain models for rentals."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Rental:
    """A copy lent to a reader.

    ``rented_to`` holds the due date while the rental is open and the actual
    return date once it has been completed.
    """

    id: int
    copy_id: int
    reader_id: int
    rented_from: date
    rented_to: date
