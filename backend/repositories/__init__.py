from .books import BooksRepository
from .errors import StorageError
from .memory import BookStore
from . import models

__all__ = ["BooksRepository", "BookStore", "StorageError", "models"]
