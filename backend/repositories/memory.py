"""
In-memory book store.

Lives for the lifetime of the application; nothing is persisted.
"""
from typing import Dict, List, Optional

from domain.models import Book
from repositories.locks import ReadWriteLock


class BookStore:
    """Thread-safe registry of books with auto-incrementing ids."""

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def add_book(self, name: str, author: str) -> Book:
        with self._lock.write_locked():
            book = Book(id=self._next_id, name=name, author=author)
            self._books[book.id] = book
            self._next_id += 1
        return book

    def list_books(self) -> List[Book]:
        with self._lock.read_locked():
            books = list(self._books.values())
        return sorted(books, key=lambda b: b.id)

    def get_book(self, book_id: int) -> Optional[Book]:
        with self._lock.read_locked():
            return self._books.get(book_id)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._books)
