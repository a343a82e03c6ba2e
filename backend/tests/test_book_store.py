import threading
from concurrent.futures import ThreadPoolExecutor

from domain.models import Book
from repositories import BookStore


def test_add_book_assigns_first_id():
    store = BookStore()

    book = store.add_book("Dune", "Herbert")

    assert book == Book(id=1, name="Dune", author="Herbert")
    assert store.get_book(1) == book
    assert store.get_book(999) is None


def test_ids_strictly_increase():
    store = BookStore()
    ids = [store.add_book(f"Book {i}", "Author").id for i in range(20)]

    assert ids == list(range(1, 21))


def test_get_book_returns_what_add_returned():
    store = BookStore()
    added = [store.add_book(f"Title {i}", f"Author {i}") for i in range(5)]

    for book in added:
        assert store.get_book(book.id) == book


def test_list_books_returns_every_added_book_once():
    store = BookStore()
    assert store.list_books() == []

    added = [store.add_book(name, "X") for name in ("c", "a", "b")]
    listed = store.list_books()

    assert listed == added
    assert len({b.id for b in listed}) == 3
    assert store.count() == 3


def test_list_books_is_a_snapshot():
    store = BookStore()
    store.add_book("First", "A")
    snapshot = store.list_books()

    store.add_book("Second", "B")
    snapshot.clear()

    assert len(store.list_books()) == 2


def test_concurrent_adds_produce_contiguous_ids():
    store = BookStore()
    start = threading.Barrier(100)

    def add(i):
        start.wait()
        return store.add_book(f"Book {i}", f"Author {i}").id

    with ThreadPoolExecutor(max_workers=100) as pool:
        ids = list(pool.map(add, range(100)))

    assert sorted(ids) == list(range(1, 101))
    assert store.count() == 100


def test_concurrent_reads_and_writes():
    store = BookStore()
    store.add_book("Seed", "S")
    errors = []

    def reader():
        for _ in range(200):
            books = store.list_books()
            if [b.id for b in books] != list(range(1, len(books) + 1)):
                errors.append(books)

    def writer():
        for i in range(50):
            store.add_book(f"W{i}", "W")

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads += [threading.Thread(target=writer) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert store.count() == 101
