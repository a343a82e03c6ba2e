"""
Core domain models for the bookstore catalog.
These are framework-agnostic and shared by both storage backends.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Book:
    """
    A book record in the catalog.

    The id is assigned by the store when the book is added and never
    changes afterward.
    """
    id: int
    name: str
    author: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "author": self.author,
        }
