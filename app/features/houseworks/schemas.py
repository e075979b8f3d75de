"""Request and response schemas for Houseworks API"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class HouseworkOut(BaseModel):
    """Housework as returned by the API"""
    id: int
    task_name: Optional[str] = None
    term: Optional[str] = None
    point: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class HouseworkResponse(BaseModel):
    housework: HouseworkOut


class HouseworkListResponse(BaseModel):
    houseworks: List[HouseworkOut]
    count: int


class DeleteResponse(BaseModel):
    success: bool
    message: str
