"""Repository factory and exports"""
from supabase import Client
from .houseworks import HouseworkSupabaseRepository


class RepositoryFactory:
    """Factory for creating repository instances"""

    def __init__(self, client: Client):
        self._client = client
        self._houseworks: HouseworkSupabaseRepository = None

    @property
    def houseworks(self) -> HouseworkSupabaseRepository:
        """Get housework repository"""
        if self._houseworks is None:
            self._houseworks = HouseworkSupabaseRepository(self._client)
        return self._houseworks


__all__ = [
    'RepositoryFactory',
    'HouseworkSupabaseRepository',
]
