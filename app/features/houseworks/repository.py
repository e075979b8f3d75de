"""SQLAlchemy repository for Houseworks"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.housework import Housework as HouseworkORM
from app.features.houseworks.domain import (
    HouseworkCreate,
    HouseworkRecord,
    HouseworkUpdate,
    filter_values,
)
from app.features.houseworks.ports import HouseworkRepositoryBase

logger = logging.getLogger(__name__)


class HouseworkRepository(HouseworkRepositoryBase):
    """Repository for housework operations using SQLAlchemy"""

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db: SQLAlchemy async database session
        """
        self.db = db

    @staticmethod
    def _to_domain(row: HouseworkORM) -> HouseworkRecord:
        return HouseworkRecord.model_validate(row)

    @staticmethod
    def _where(stmt, filters: Optional[Dict[str, Any]]):
        # Unknown filter keys are ignored the same way bulk assignment ignores them
        for key, value in filter_values(filters or {}).items():
            column = getattr(HouseworkORM, key)
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        return stmt

    async def find_by_id(self, id: int) -> Optional[HouseworkRecord]:
        row = await self.db.get(HouseworkORM, id)
        return self._to_domain(row) if row else None

    async def find_all(self, limit: Optional[int] = None, offset: int = 0) -> List[HouseworkRecord]:
        stmt = select(HouseworkORM).order_by(HouseworkORM.id.asc())
        if limit:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.db.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[HouseworkRecord]:
        stmt = self._where(select(HouseworkORM), filters).order_by(HouseworkORM.id.asc())
        if limit:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.db.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def create(self, data: HouseworkCreate) -> HouseworkRecord:
        row = HouseworkORM(**data.model_dump())
        self.db.add(row)
        await self.db.commit()
        # Pull server-generated id and timestamps
        await self.db.refresh(row)

        logger.info(f"Created housework {row.id} ('{row.task_name}')")
        return self._to_domain(row)

    async def update(self, id: int, data: HouseworkUpdate) -> Optional[HouseworkRecord]:
        row = await self.db.get(HouseworkORM, id)
        if row is None:
            return None

        changes = data.changes()
        if not changes:
            # No fields to update
            return self._to_domain(row)

        for key, value in changes.items():
            setattr(row, key, value)
        await self.db.commit()
        await self.db.refresh(row)

        logger.info(f"Updated housework {id}: {', '.join(changes)}")
        return self._to_domain(row)

    async def delete(self, id: int) -> bool:
        row = await self.db.get(HouseworkORM, id)
        if row is None:
            return False

        await self.db.delete(row)
        await self.db.commit()

        logger.info(f"Deleted housework {id}")
        return True

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        stmt = self._where(select(func.count()).select_from(HouseworkORM), filters)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())
