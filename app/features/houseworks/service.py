"""Business logic for Houseworks"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from app.features.houseworks.domain import (
    HouseworkCreate,
    HouseworkRecord,
    HouseworkUpdate,
    fillable_fields,
)
from app.features.houseworks.ports import HouseworkRepositoryBase

logger = logging.getLogger(__name__)


class HouseworkNotFoundError(LookupError):
    """Raised when a housework ID does not exist"""

    def __init__(self, housework_id: int):
        self.housework_id = housework_id
        super().__init__(f"Housework {housework_id} not found")


class HouseworkService:
    """Service layer for housework CRUD"""

    def __init__(self, repository: HouseworkRepositoryBase):
        self.repository = repository

    async def list_houseworks(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[HouseworkRecord]:
        """
        List houseworks, optionally narrowed by equality filters.

        Args:
            filters: task_name / term / point values to match; other keys are ignored
            limit: Maximum number of records
            offset: Records to skip

        Returns:
            Houseworks ordered by ID
        """
        active: Dict[str, Any] = fillable_fields(filters or {})
        if active:
            return await self.repository.find_by_filters(active, limit=limit, offset=offset)
        return await self.repository.find_all(limit=limit, offset=offset)

    async def get_housework(self, housework_id: int) -> HouseworkRecord:
        housework = await self.repository.find_by_id(housework_id)
        if housework is None:
            raise HouseworkNotFoundError(housework_id)
        return housework

    async def create_housework(self, data: Mapping[str, Any]) -> HouseworkRecord:
        """Create a housework from a mapping; keys outside task_name/term/point are dropped"""
        return await self.repository.create(HouseworkCreate(**fillable_fields(data)))

    async def update_housework(self, housework_id: int, data: Mapping[str, Any]) -> HouseworkRecord:
        """Bulk-update the supplied fillable fields of a housework"""
        housework = await self.repository.update(housework_id, HouseworkUpdate(**fillable_fields(data)))
        if housework is None:
            raise HouseworkNotFoundError(housework_id)
        return housework

    async def delete_housework(self, housework_id: int) -> None:
        if not await self.repository.delete(housework_id):
            raise HouseworkNotFoundError(housework_id)
