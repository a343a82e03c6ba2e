"""
Sample data for a fresh catalog.
"""
import logging

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    ("The Go Programming Language", "Alan Donovan"),
    ("Clean Code", "Robert Martin"),
    ("The Pragmatic Programmer", "David Thomas"),
]


def seed_sample_books(store) -> int:
    """Add the sample books if the store is empty. Returns how many were added."""
    if store.count() > 0:
        logger.debug("seed: store already has books, skipping")
        return 0
    for name, author in SAMPLE_BOOKS:
        store.add_book(name, author)
    logger.info("seed: added %d sample books", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)
