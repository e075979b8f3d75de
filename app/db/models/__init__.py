"""SQLAlchemy ORM models"""

from app.db.models.housework import Housework

__all__ = ["Housework"]
