"""Domain models for library readers."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Reader:
    """A registered library reader."""

    id: int
    first_name: str
    last_name: str
    email: str | None
    account_created: date
