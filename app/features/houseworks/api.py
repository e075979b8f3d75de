"""Houseworks API endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app import config
from app.db import get_db
from app.features.houseworks.domain import HouseworkCreate, HouseworkUpdate
from app.features.houseworks.repository import HouseworkRepository
from app.features.houseworks.schemas import (
    DeleteResponse,
    HouseworkListResponse,
    HouseworkResponse,
)
from app.features.houseworks.service import HouseworkNotFoundError, HouseworkService
from app.infra.supabase import get_supabase_client
from app.infra.supabase.repositories import RepositoryFactory

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/houseworks", tags=["houseworks"])


async def get_housework_service(db: AsyncSession = Depends(get_db)) -> HouseworkService:
    """Build the service on top of the configured persistence backend"""
    if config.HOUSEWORK_BACKEND == "supabase":
        return HouseworkService(RepositoryFactory(get_supabase_client()).houseworks)
    return HouseworkService(HouseworkRepository(db))


@router.get("", response_model=HouseworkListResponse)
async def list_houseworks(
    task_name: Optional[str] = None,
    term: Optional[str] = None,
    point: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: HouseworkService = Depends(get_housework_service),
):
    """
    List houseworks.

    task_name, term and point act as exact-match filters when given.
    """
    filters = {
        key: value
        for key, value in (("task_name", task_name), ("term", term), ("point", point))
        if value is not None
    }
    try:
        houseworks = await service.list_houseworks(filters, limit=limit, offset=offset)
    except Exception as e:
        logger.exception("Failed to list houseworks")
        raise HTTPException(status_code=500, detail=f"Failed to list houseworks: {str(e)}")

    return {
        "houseworks": houseworks,
        "count": len(houseworks)
    }


@router.get("/{housework_id}", response_model=HouseworkResponse)
async def get_housework(
    housework_id: int,
    service: HouseworkService = Depends(get_housework_service),
):
    """Get a single housework by ID"""
    try:
        housework = await service.get_housework(housework_id)
    except HouseworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"housework": housework}


@router.post("", response_model=HouseworkResponse, status_code=201)
async def create_housework(
    request: HouseworkCreate,
    service: HouseworkService = Depends(get_housework_service),
):
    """
    Create a housework.

    Only task_name, term and point are taken from the body; any other key is ignored.
    """
    try:
        housework = await service.create_housework(request.model_dump())
    except Exception as e:
        logger.exception("Failed to create housework")
        raise HTTPException(status_code=500, detail=f"Failed to create housework: {str(e)}")

    return {"housework": housework}


@router.put("/{housework_id}", response_model=HouseworkResponse)
async def update_housework(
    housework_id: int,
    request: HouseworkUpdate,
    service: HouseworkService = Depends(get_housework_service),
):
    """Update the supplied fields of a housework"""
    try:
        housework = await service.update_housework(housework_id, request.changes())
    except HouseworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to update housework {housework_id}")
        raise HTTPException(status_code=500, detail=f"Failed to update housework: {str(e)}")

    return {"housework": housework}


@router.delete("/{housework_id}", response_model=DeleteResponse)
async def delete_housework(
    housework_id: int,
    service: HouseworkService = Depends(get_housework_service),
):
    """Delete a housework"""
    try:
        await service.delete_housework(housework_id)
    except HouseworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"success": True, "message": "Housework deleted successfully"}
