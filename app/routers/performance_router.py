# /app/routers/performance_router.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_student
from ..models.performance_model import Performance, PerformanceCreate, PerformanceCreateResponse
from ..services import performance_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/add", response_model=PerformanceCreateResponse, status_code=status.HTTP_201_CREATED, summary="Add a Performance Record")
def add_performance(
    performance_in: PerformanceCreate,
    db: DatabaseService = Depends(get_db_service),
    current_student=Depends(get_current_student),
):
    try:
        record = performance_service.add_performance(db, performance_in, student_id=current_student.id)
    except Exception as e:
        logger.exception("Error adding performance: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error adding performance data")
    return PerformanceCreateResponse(performance=Performance.model_validate(record))


# Registered before "/{student_id}" so the collection path is never captured as an id.
@router.get("/", response_model=List[Performance], summary="Get All Performance Records")
def get_all_performances(db: DatabaseService = Depends(get_db_service), current_student=Depends(get_current_student)):
    return performance_service.get_all_performances(db)


@router.get("/{student_id}", response_model=List[Performance], summary="Get a Student's Performance Records")
def get_student_performance(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_student=Depends(get_current_student),
):
    return performance_service.get_student_performances(db, student_id)
