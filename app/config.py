import os
from typing import List

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database
# PostgreSQL (Supabase) connection string format:
# postgresql://postgres:[PASSWORD]@[HOST]:[PORT]/postgres
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./housework.db")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))  # Default 5 connections
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))  # Default 10 overflow
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))  # Default 30 seconds
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))  # Default 1 hour
DB_ECHO = _env_bool("DB_ECHO", False)
DB_AUTO_CREATE = _env_bool("DB_AUTO_CREATE", True)

# Which persistence backend the houseworks API talks to: "sql" or "supabase"
HOUSEWORK_BACKEND = os.getenv("HOUSEWORK_BACKEND", "sql").strip().lower()

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

# HTTP
CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS", ["*"])
