"""Houseworks feature module"""

from app.features.houseworks.api import router
from app.features.houseworks.domain import (
    FILLABLE,
    HouseworkCreate,
    HouseworkRecord,
    HouseworkUpdate,
    fillable_fields,
)
from app.features.houseworks.ports import HouseworkRepositoryBase
from app.features.houseworks.repository import HouseworkRepository
from app.features.houseworks.service import HouseworkNotFoundError, HouseworkService

__all__ = [
    "router",
    "FILLABLE",
    "HouseworkCreate",
    "HouseworkRecord",
    "HouseworkUpdate",
    "fillable_fields",
    "HouseworkRepositoryBase",
    "HouseworkRepository",
    "HouseworkNotFoundError",
    "HouseworkService",
]
