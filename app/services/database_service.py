# /app/services/database_service.py

from typing import List, Dict, Generator
import pandas as pd
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.performance_repository_sql import PerformanceRepositorySQL
from .database_helpers.study_goal_repository_sql import StudyGoalRepositorySQL


class DatabaseService:
    """
    The single persistence facade used by every service. It owns one SQL
    repository per table and delegates to them.
    """

    def __init__(self, db_session: Session):
        if db_session is None:
            raise ValueError("A database session is required.")
        self.student_repo = StudentRepositorySQL(db_session)
        self.performance_repo = PerformanceRepositorySQL(db_session)
        self.study_goal_repo = StudyGoalRepositorySQL(db_session)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_student_by_id(self, student_id: str): return self.student_repo.get_student_by_id(student_id)
    def get_student_by_email(self, email: str): return self.student_repo.get_student_by_email(email)
    def find_conflicting_student(self, email: str, roll_number: str): return self.student_repo.get_student_by_email_or_roll_number(email, roll_number)
    def add_student(self, student_record: Dict): return self.student_repo.add_student(student_record)

    # --- PERFORMANCE METHODS (DELEGATED) ---
    def add_performance_record(self, performance_record: Dict): return self.performance_repo.add_performance(performance_record)
    def get_performances_by_student_id(self, student_id: str) -> List: return self.performance_repo.get_performances_by_student_id(student_id)
    def get_all_performances(self) -> List: return self.performance_repo.get_all_performances()

    def get_performances_as_dataframe(self, student_id: str) -> pd.DataFrame:
        """
        Returns a student's records as a DataFrame (oldest first) with the
        columns needed for subject-level aggregation.
        """
        records = self.performance_repo.get_performances_by_student_id(student_id)
        rows = [{"subject": r.subject, "finalExamMarks": r.finalExamMarks} for r in reversed(records)]
        return pd.DataFrame(rows, columns=["subject", "finalExamMarks"])

    # --- STUDY GOAL METHODS (DELEGATED) ---
    def get_goals_by_student_id(self, student_id: str) -> List: return self.study_goal_repo.get_goals_by_student_id(student_id)
    def add_study_goal(self, goal_record: Dict): return self.study_goal_repo.add_goal(goal_record)
    def update_study_goal(self, goal_id: str, goal_update_data: Dict): return self.study_goal_repo.update_goal(goal_id, goal_update_data)
    def delete_study_goal(self, goal_id: str) -> bool: return self.study_goal_repo.delete_goal(goal_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
