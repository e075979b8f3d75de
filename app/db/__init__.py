"""Database package: engine, sessions and ORM models"""

from app.db.base import Base
from app.db.session import SessionLocal, engine, get_db, init_db

__all__ = ["Base", "SessionLocal", "engine", "get_db", "init_db"]
