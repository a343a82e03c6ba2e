class StorageError(Exception):
    """Raised when the backing database fails a read or write."""
