# /app/models/study_goal_model.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime, date, timezone
from enum import Enum


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Deadlines are stored as UTC; naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class StudyGoalCreate(BaseModel):
    studentId: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    deadline: datetime
    priority: Priority = Priority.MEDIUM

    @field_validator("deadline")
    @classmethod
    def deadline_to_utc(cls, value):
        return to_utc(value)


class StudyGoalUpdate(BaseModel):
    """
    Partial update. Any status is reachable from any other; there is no
    enforced transition order.
    """
    subject: Optional[str] = Field(default=None, min_length=1)
    topic: Optional[str] = Field(default=None, min_length=1)
    deadline: Optional[datetime] = None
    priority: Optional[Priority] = None
    status: Optional[GoalStatus] = None

    @field_validator("deadline")
    @classmethod
    def deadline_to_utc(cls, value):
        return to_utc(value)


class StudyGoal(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    studentId: str
    subject: str
    topic: str
    deadline: datetime
    priority: Priority
    status: GoalStatus
    createdAt: Optional[datetime] = None

    @field_validator("deadline")
    @classmethod
    def deadline_to_utc(cls, value):
        return to_utc(value)


class GeneratedGoal(BaseModel):
    """One goal as the AI capability is asked to describe it."""
    subject: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    deadline: date
    priority: Priority


class StudyPlanRequest(BaseModel):
    studentId: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str
