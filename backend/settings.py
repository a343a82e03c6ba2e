import os

from sqlalchemy.engine import URL

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_prefix(val: str | None) -> str:
    # "api", "/api" and "/api/" all mean "/api"; empty means no prefix.
    val = (val or "").strip().strip("/")
    return f"/{val}" if val else ""


def _getenv(key: str, default: str) -> str:
    # Empty values fall back to the default, same as unset ones.
    return os.getenv(key) or default


class Settings:
    def __init__(self) -> None:
        self.BOOKSTORE_BACKEND: str = _getenv("BOOKSTORE_BACKEND", "memory").lower()
        self.DB_HOST: str = _getenv("DB_HOST", "localhost")
        self.DB_PORT: str = _getenv("DB_PORT", "5432")
        self.DB_USER: str = _getenv("DB_USER", "postgres")
        self.DB_PASSWORD: str = _getenv("DB_PASSWORD", "")
        self.DB_NAME: str = _getenv("DB_NAME", "bookstore")
        self.DB_SSLMODE: str = _getenv("DB_SSLMODE", "disable")
        self.DATABASE_URL: str | None = os.getenv("DATABASE_URL") or None
        self.HOST: str = _getenv("HOST", "0.0.0.0")
        self.PORT: int = int(_getenv("PORT", "8080").lstrip(":"))
        self.API_PREFIX: str = _as_prefix(os.getenv("API_PREFIX"))
        self.SEED_SAMPLE_DATA: bool = _as_bool(os.getenv("SEED_SAMPLE_DATA"), True)
        self.LOG_LEVEL: str = _getenv("LOG_LEVEL", "INFO")

    @property
    def database_url(self) -> str | URL:
        """SQLAlchemy URL for the database backend."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=int(self.DB_PORT),
            database=self.DB_NAME,
            query={"sslmode": self.DB_SSLMODE},
        )


settings = Settings()
