"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, Integer, String

from db import Base


class BookORM(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String, nullable=False)
    author = Column(String, nullable=False)
