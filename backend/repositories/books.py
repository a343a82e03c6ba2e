"""
Book repository backed by SQLAlchemy.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.models import Book
from repositories.errors import StorageError
from repositories.models import BookORM

logger = logging.getLogger(__name__)


def _book_from_orm(orm: BookORM) -> Book:
    return Book(id=orm.id, name=orm.name, author=orm.author)


class BooksRepository:
    """Database-backed book store; each call runs in its own session."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def add_book(self, name: str, author: str) -> Book:
        with self._session_factory() as session:
            orm = BookORM(name=name, author=author)
            try:
                session.add(orm)
                session.commit()
                session.refresh(orm)
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("add_book failed")
                raise StorageError(str(e)) from e
            return _book_from_orm(orm)

    def list_books(self) -> List[Book]:
        with self._session_factory() as session:
            try:
                rows = session.scalars(select(BookORM).order_by(BookORM.id)).all()
            except SQLAlchemyError as e:
                logger.exception("list_books failed")
                raise StorageError(str(e)) from e
            return [_book_from_orm(b) for b in rows]

    def get_book(self, book_id: int) -> Optional[Book]:
        with self._session_factory() as session:
            try:
                orm = session.get(BookORM, book_id)
            except SQLAlchemyError as e:
                logger.exception("get_book failed for id %s", book_id)
                raise StorageError(str(e)) from e
            if not orm:
                return None
            return _book_from_orm(orm)

    def count(self) -> int:
        with self._session_factory() as session:
            try:
                return session.scalar(select(func.count()).select_from(BookORM)) or 0
            except SQLAlchemyError as e:
                logger.exception("count failed")
                raise StorageError(str(e)) from e
