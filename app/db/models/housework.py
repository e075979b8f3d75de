"""SQLAlchemy ORM model for houseworks table"""

from sqlalchemy import Column, Integer, DateTime, Text
from sqlalchemy.sql import func

from app.db.base import Base


class Housework(Base):
    """
    SQLAlchemy ORM model for the houseworks table.
    task_name, term and point are free text; the table enforces nothing on them.
    """
    __tablename__ = "houseworks"

    # Primary key
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Housework information
    task_name = Column(Text, nullable=True)
    term = Column(Text, nullable=True)
    point = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<Housework(id={self.id}, task_name='{self.task_name}', term='{self.term}', point='{self.point}')>"
