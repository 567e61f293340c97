"""Domain models for physical copies of books."""

from dataclasses import dataclass
from enum import Enum


class CopyStatus(Enum):
    """Lending status of a copy."""

    AVAILABLE = "AVAILABLE"
    RENTED = "RENTED"
    LOST = "LOST"
    DESTROYED = "DESTROYED"


@dataclass(frozen=True)
class Copy:
    """A physical copy of a book."""

    id: int
    book_id: int
    status: CopyStatus
