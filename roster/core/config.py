# roster/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ATTENDANCE_WEEKS = 10
MAX_ATTENDANCE_WEEKS = 52
MIN_AGE = 3
MAX_AGE = 99


class Settings:
    """Runtime settings read from the environment (.env supported)."""

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./roster.db")
    SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
