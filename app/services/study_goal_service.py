# /app/services/study_goal_service.py

import uuid
from datetime import datetime, timezone
from typing import List

from app.core.exceptions import NotFoundError, ValidationError
from ..models.study_goal_model import StudyGoalCreate, StudyGoalUpdate, GoalStatus
from .database_service import DatabaseService


def get_goals(db: DatabaseService, student_id: str) -> List:
    return db.get_goals_by_student_id(student_id)


def create_goal(db: DatabaseService, goal: StudyGoalCreate):
    record = {
        **goal.model_dump(),
        "id": f"goal_{uuid.uuid4().hex[:16]}",
        "priority": goal.priority.value,
        "status": GoalStatus.PENDING.value,
        "createdAt": datetime.now(timezone.utc),
    }
    return db.add_study_goal(record)


def update_goal(db: DatabaseService, goal_id: str, goal_update: StudyGoalUpdate):
    """Applies only the fields that were sent. Any status may follow any other."""
    update_data = goal_update.model_dump(exclude_unset=True, mode="json")
    if any(value is None for value in update_data.values()):
        raise ValidationError("Goal fields cannot be set to null")
    if "deadline" in update_data:
        update_data["deadline"] = goal_update.deadline

    updated_goal = db.update_study_goal(goal_id, update_data)
    if updated_goal is None:
        raise NotFoundError(f"Study goal with ID {goal_id} not found")
    return updated_goal


def delete_goal(db: DatabaseService, goal_id: str) -> None:
    if not db.delete_study_goal(goal_id):
        raise NotFoundError(f"Study goal with ID {goal_id} not found")
