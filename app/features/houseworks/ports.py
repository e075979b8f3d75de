"""Repository interface for housework persistence"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.features.houseworks.domain import HouseworkCreate, HouseworkRecord, HouseworkUpdate


class HouseworkRepositoryBase(ABC):
    """
    Persistence collaborator for HouseworkRecord.
    Owns identity assignment, timestamps, loading, saving and deletion.
    """

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[HouseworkRecord]:
        """Find a single record by ID"""

    @abstractmethod
    async def find_all(self, limit: Optional[int] = None, offset: int = 0) -> List[HouseworkRecord]:
        """Find all records ordered by ID with optional pagination"""

    @abstractmethod
    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[HouseworkRecord]:
        """Find records whose fillable fields equal the given values, ordered by ID"""

    @abstractmethod
    async def create(self, data: HouseworkCreate) -> HouseworkRecord:
        """Insert a new record and return it with its assigned ID"""

    @abstractmethod
    async def update(self, id: int, data: HouseworkUpdate) -> Optional[HouseworkRecord]:
        """Update the supplied fields of a record; None if it does not exist"""

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Delete a record by ID; False if nothing was deleted"""

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count records matching filters"""

    async def save(self, record: HouseworkRecord) -> HouseworkRecord:
        """
        Insert a new record or write back the fields of a persisted one.
        The given record picks up the stored id and timestamps.
        """
        if record.id is None:
            saved = await self.create(HouseworkCreate(**record.attributes()))
        else:
            saved = await self.update(record.id, HouseworkUpdate(**record.attributes()))
            if saved is None:
                raise LookupError(f"Housework {record.id} no longer exists")

        record.id = saved.id
        record.created_at = saved.created_at
        record.updated_at = saved.updated_at
        return saved
