# /app/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the students table. This is the only module that
reads or writes Student rows directly.
"""

from typing import Dict, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.models.student_models import Student


class StudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_email(self, email: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.email == email).first()

    def get_student_by_email_or_roll_number(self, email: str, roll_number: str) -> Optional[Student]:
        """Finds any existing student that would clash with a new registration."""
        return (
            self.db.query(Student)
            .filter(or_(Student.email == email, Student.rollNumber == roll_number))
            .first()
        )

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(new_student)
        return new_student
