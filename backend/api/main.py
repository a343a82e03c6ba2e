"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books
from db import init_db, make_engine, make_session_factory
from logging_config import setup_logging
from repositories import BooksRepository, BookStore
from services.seed import seed_sample_books
from settings import Settings, settings

logger = logging.getLogger(__name__)


def build_store(app_settings: Settings):
    """Create the configured store. Returns (store, engine); engine is None for memory."""
    backend = app_settings.BOOKSTORE_BACKEND
    if backend == "memory":
        return BookStore(), None
    if backend == "database":
        engine = make_engine(app_settings.database_url)
        try:
            init_db(engine)
        except Exception:
            logger.exception("Failed to connect to database")
            engine.dispose()
            raise
        return BooksRepository(make_session_factory(engine)), engine
    raise ValueError(f"Unknown BOOKSTORE_BACKEND: {backend!r}")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 instead of FastAPI's default 422."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(store=None, seed_sample_data: bool | None = None, app_settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    ``store`` replaces the store the lifespan would otherwise build from
    settings. ``seed_sample_data`` overrides SEED_SAMPLE_DATA.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.LOG_LEVEL)
    if seed_sample_data is None:
        seed_sample_data = app_settings.SEED_SAMPLE_DATA
    books_prefix = f"{app_settings.API_PREFIX}/books"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = None
        if store is not None:
            app.state.store = store
        else:
            app.state.store, engine = build_store(app_settings)
        logger.info("Using %s book store", type(app.state.store).__name__)

        if seed_sample_data:
            seed_sample_books(app.state.store)

        logger.info("Available endpoints:")
        logger.info("  POST %s - Add a new book", books_prefix)
        logger.info("  GET %s - Get all books", books_prefix)
        logger.info("  GET %s/{id} - Get book by ID", books_prefix)
        try:
            yield
        finally:
            if engine is not None:
                engine.dispose()

    app = FastAPI(
        title="Bookstore API",
        description="Catalog of books with create, list and lookup by id",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(books.router, prefix=books_prefix, tags=["books"])

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
