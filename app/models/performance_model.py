# /app/models/performance_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from enum import Enum

from .student_model import StudentSummary


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class PerformanceMetrics(BaseModel):
    """The five bounded metrics every performance record carries."""
    attendance: float = Field(..., ge=0, le=100)
    assignmentScore: float = Field(..., ge=0, le=100)
    internalMarks: float = Field(..., ge=0, le=100)
    projectMarks: float = Field(..., ge=0, le=100)
    finalExamMarks: float = Field(..., ge=0, le=100)


class PerformanceCreate(PerformanceMetrics):
    """
    Payload for POST /performance/add. The grade is never accepted from the
    client; `studentId` defaults to the authenticated student.
    """
    studentId: Optional[str] = None
    subject: str = Field(..., min_length=1)


class Performance(PerformanceMetrics):
    model_config = ConfigDict(from_attributes=True)

    id: str
    studentId: str
    subject: str
    predictedGrade: Optional[Grade] = None
    createdAt: Optional[datetime] = None
    student: Optional[StudentSummary] = None


class PerformanceCreateResponse(BaseModel):
    message: str = "Performance data added successfully"
    performance: Performance

