"""
Worker search API endpoints
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from ..core.dependencies import get_store
from ..core.exceptions import NotFoundError
from ..schemas.profile import WorkerFilters, WorkerWithProfile
from ..storage.base import EntityStore

router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("", response_model=List[WorkerWithProfile])
async def list_workers(
    skills: Optional[str] = Query(default=None, description="Case-insensitive substring of skills"),
    location: Optional[str] = Query(default=None, description="Case-insensitive substring of location"),
    availability: Optional[str] = Query(default=None, description="Exact availability, e.g. Available Now"),
    store: EntityStore = Depends(get_store)
):
    """List workers with their profiles, optionally filtered"""
    filters = WorkerFilters(skills=skills, location=location, availability=availability)
    return store.get_workers_with_profiles(filters)


@router.get("/{user_id}", response_model=WorkerWithProfile)
async def get_worker(
    user_id: str,
    store: EntityStore = Depends(get_store)
):
    """Get one worker with their profile"""
    worker = store.get_worker_with_profile(user_id)
    if worker is None:
        raise NotFoundError("Worker not found")
    return worker
