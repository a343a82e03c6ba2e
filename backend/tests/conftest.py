import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import init_db, make_engine, make_session_factory  # noqa: E402
from repositories import BooksRepository, BookStore  # noqa: E402


@pytest.fixture
def memory_store():
    return BookStore()


@pytest.fixture
def sqlite_engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_store(sqlite_engine):
    return BooksRepository(make_session_factory(sqlite_engine))
