"""Body measurement progress routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from datetime import datetime
from typing import List, Optional

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.models import User
from domain.schemas.progress_schemas import (
    ProgressCreate,
    ProgressResponse,
    ProgressSummaryResponse,
)
from services.progress_service import ProgressService

router = APIRouter(prefix="/progress", tags=["Progress"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.progress")


@router.post("", response_model=ProgressResponse, status_code=status.HTTP_201_CREATED)
def record_progress(
    payload: ProgressCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Record a weigh-in; also updates the user's current weight"""
    record = ProgressService.record_progress(db, current_user, payload)
    return ProgressResponse.model_validate(record)


@router.get("", response_model=List[ProgressResponse])
def list_progress(
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    records = ProgressService.list_progress(db, current_user, start, end)
    return [ProgressResponse.model_validate(r) for r in records]


@router.get("/summary", response_model=ProgressSummaryResponse)
def progress_summary(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return ProgressService.summarize(db, current_user)


@router.delete("/{progress_id}", response_model=DeleteResponse)
def delete_progress(
    progress_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ProgressService.delete_progress(db, current_user, progress_id)
    return DeleteResponse(deleted=str(progress_id))
