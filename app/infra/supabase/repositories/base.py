"""Base repository with common CRUD operations over a Supabase table"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from pydantic import BaseModel
from supabase import Client

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _table(self):
        return self._client.table(self._table_name)

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert a stored row to its domain model"""
        return self._model_class.model_validate(data, context={"persisted": True})

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        return [self._to_model(item) for item in data]

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        for key, value in (filters or {}).items():
            query = query.is_(key, "null") if value is None else query.eq(key, value)
        return query

    async def find_by_id(self, id: int) -> Optional[T]:
        response = self._table().select("*").eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """Find all records ordered by ID with optional pagination"""
        query = self._table().select("*").order("id")

        if limit:
            query = query.limit(limit)

        if offset:
            query = query.offset(offset)

        response = query.execute()
        return self._to_models(response.data)

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[T]:
        query = self._apply_filters(self._table().select("*"), filters).order("id")

        if limit:
            query = query.limit(limit)

        if offset:
            query = query.offset(offset)

        response = query.execute()
        return self._to_models(response.data)

    async def create(self, data: CreateT) -> T:
        data_dict = data.model_dump(mode='json')
        response = self._table().insert(data_dict).execute()

        if not response.data:
            raise ValueError("Failed to create record")

        return self._to_model(response.data[0])

    async def update(self, id: int, data: UpdateT) -> Optional[T]:
        """Update a record by ID, writing only the fields that were set"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')

        if not data_dict:
            # No fields to update
            return await self.find_by_id(id)

        response = self._table().update(data_dict).eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete(self, id: int) -> bool:
        response = self._table().delete().eq("id", id).execute()
        return len(response.data) > 0

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        query = self._apply_filters(self._table().select("id", count="exact"), filters)
        response = query.execute()
        return response.count or 0
