# /app/routers/study_goal_router.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_study_plan_service
from ..core.exceptions import DatabaseError, GenerationError, InsufficientDataError, NotFoundError, ValidationError
from ..models.study_goal_model import StudyGoal, StudyGoalCreate, StudyGoalUpdate, StudyPlanRequest, MessageResponse
from ..services import study_goal_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.study_plan_service import StudyPlanService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{student_id}", response_model=List[StudyGoal], summary="Get a Student's Goals by Deadline")
def get_goals(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return study_goal_service.get_goals(db, student_id)


@router.post("/add", response_model=StudyGoal, status_code=status.HTTP_201_CREATED, summary="Create a Study Goal")
def create_goal(goal_in: StudyGoalCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return study_goal_service.create_goal(db, goal_in)
    except Exception as e:
        logger.exception("Error creating study goal: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not create study goal")


@router.post("/generate", response_model=List[StudyGoal], status_code=status.HTTP_201_CREATED, summary="Generate an AI Study Plan")
async def generate_study_plan(
    request: StudyPlanRequest,
    db: DatabaseService = Depends(get_db_service),
    service: StudyPlanService = Depends(get_study_plan_service),
):
    try:
        return await service.generate_plan(request.studentId, db)
    except InsufficientDataError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except GenerationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error generating study plan: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate study plan. Server logs have more details.",
        )


@router.put("/update/{goal_id}", response_model=StudyGoal, summary="Update a Study Goal")
def update_goal(goal_id: str, goal_update: StudyGoalUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return study_goal_service.update_goal(db, goal_id, goal_update)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/delete/{goal_id}", response_model=MessageResponse, summary="Delete a Study Goal")
def delete_goal(goal_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        study_goal_service.delete_goal(db, goal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Goal deleted successfully")
