# wordbank/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = os.getenv("APP_NAME", "Word Bank API")
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "info")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # All REST routes are mounted under this prefix
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    # CORS origins; "*" allows any origin (credentials are then disabled)
    CORS_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite://worddb.sqlite3")
    # Create missing tables at startup; turn off when Aerich migrations manage the schema
    generate_schemas: bool = os.getenv("DB_GENERATE_SCHEMAS", "true").lower() in ("true", "1", "yes")

    # Default admin account created on first start (skipped when no password is set)
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str | None = os.getenv("ADMIN_PASSWORD")

settings = Settings()  # Instantiate configuration
