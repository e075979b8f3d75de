"""Housework repository backed by Supabase"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client  # type: ignore

from app.features.houseworks.domain import (
    HouseworkCreate,
    HouseworkRecord,
    HouseworkUpdate,
    filter_values,
)
from app.features.houseworks.ports import HouseworkRepositoryBase

from .base import BaseRepository

logger = logging.getLogger(__name__)


class HouseworkSupabaseRepository(
    BaseRepository[HouseworkRecord, HouseworkCreate, HouseworkUpdate],
    HouseworkRepositoryBase,
):
    """Repository for housework operations through the Supabase REST API"""

    def __init__(self, client: Client):
        super().__init__(client, "houseworks", HouseworkRecord)

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[HouseworkRecord]:
        return await super().find_by_filters(filter_values(filters), limit=limit, offset=offset)

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return await super().count(filter_values(filters or {}))

    async def create(self, data: HouseworkCreate) -> HouseworkRecord:
        record = await super().create(data)
        logger.info(f"Created housework {record.id} ('{record.task_name}') in Supabase")
        return record

    async def update(self, id: int, data: HouseworkUpdate) -> Optional[HouseworkRecord]:
        changes = data.changes()
        if not changes:
            return await self.find_by_id(id)

        # PostgREST does not fire the ORM onupdate hook, so stamp updated_at here
        payload = {**changes, "updated_at": datetime.now(timezone.utc).isoformat()}
        response = self._table().update(payload).eq("id", id).execute()

        if not response.data:
            return None

        logger.info(f"Updated housework {id} in Supabase: {', '.join(changes)}")
        return self._to_model(response.data[0])

    async def delete(self, id: int) -> bool:
        deleted = await super().delete(id)
        if deleted:
            logger.info(f"Deleted housework {id} from Supabase")
        return deleted
