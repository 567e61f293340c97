"""Domain models for the book catalogue."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """A title held by the library."""

    id: int
    title: str
    author: str
    publication_year: int
