"""
Books API routes.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from domain.models import Book
from repositories import StorageError

router = APIRouter()
logger = logging.getLogger(__name__)

# Largest id a signed 64-bit database column can hold
MAX_BOOK_ID = 2**63 - 1


class BookCreate(BaseModel):
    name: str
    author: str


async def read_book_create(request: Request) -> BookCreate:
    """Parse the request body as JSON whatever Content-Type the client sent."""
    body = await request.body()
    try:
        return BookCreate.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False), body=body)


class BookResponse(BaseModel):
    id: int
    name: str
    author: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(**book.to_dict())


def get_store(request: Request):
    """Store created by the application lifespan."""
    return request.app.state.store


@router.post("", response_model=BookResponse, status_code=201)
def create_book(data: BookCreate = Depends(read_book_create), store=Depends(get_store)):
    """Add a new book."""
    if not data.name or not data.author:
        raise HTTPException(status_code=400, detail="Name and author are required")
    try:
        book = store.add_book(data.name, data.author)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to create book: {e}")
    logger.debug("created book %s", book.id)
    return book_to_response(book)


@router.get("", response_model=List[BookResponse])
def list_books(store=Depends(get_store)):
    """List all books."""
    try:
        books = store.list_books()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to get books: {e}")
    return [book_to_response(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: int = Path(..., ge=0, le=MAX_BOOK_ID), store=Depends(get_store)):
    """Get a book by ID."""
    try:
        book = store.get_book(book_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to get book: {e}")
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_to_response(book)
