# /app/services/performance_service.py

import uuid
from datetime import datetime, timezone
from typing import List

from ..models.performance_model import PerformanceCreate
from . import scoring_service
from .database_service import DatabaseService


def add_performance(db: DatabaseService, performance: PerformanceCreate, student_id: str):
    """
    Stores a new performance record. The grade always comes from the scoring
    engine; the client never supplies it.
    """
    result = scoring_service.score(
        performance.attendance,
        performance.assignmentScore,
        performance.internalMarks,
        performance.projectMarks,
        performance.finalExamMarks,
    )
    record = {
        **performance.model_dump(exclude={"studentId"}),
        "id": f"perf_{uuid.uuid4().hex[:16]}",
        "studentId": performance.studentId or student_id,
        "predictedGrade": result.grade.value,
        "createdAt": datetime.now(timezone.utc),
    }
    return db.add_performance_record(record)


def get_student_performances(db: DatabaseService, student_id: str) -> List:
    return db.get_performances_by_student_id(student_id)


def get_all_performances(db: DatabaseService) -> List:
    return db.get_all_performances()
