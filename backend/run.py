"""Start the Bookstore API with Uvicorn.

Host and port come from the HOST and PORT environment variables
(defaults ``0.0.0.0`` and ``8080``).

Usage:
    python run.py
"""
import uvicorn

from api.main import app
from settings import settings


def main() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
