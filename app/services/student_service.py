# /app/services/student_service.py

"""
Business logic for registering and authenticating students. Routers call these
functions and translate the domain exceptions they raise into HTTP errors.
"""

import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError

from app.core import security
from app.core.exceptions import AuthenticationError, ValidationError
from ..models.student_model import StudentCreate
from .database_service import DatabaseService

DUPLICATE_STUDENT_MESSAGE = "Student already exists with this email or roll number"


def create_student(db: DatabaseService, student: StudentCreate):
    """Registers a student, rejecting any clash on email or roll number."""
    if db.find_conflicting_student(email=student.email, roll_number=student.rollNumber):
        raise ValidationError(DUPLICATE_STUDENT_MESSAGE)

    record = student.model_dump(exclude={"password"})
    record["id"] = f"stu_{uuid.uuid4().hex[:16]}"
    record["password_hash"] = security.hash_password(student.password)
    try:
        return db.add_student(record)
    except IntegrityError as e:
        # A concurrent registration claimed the email or roll number after the check above.
        raise ValidationError(DUPLICATE_STUDENT_MESSAGE) from e


def authenticate_student(db: DatabaseService, email: str, password: str):
    """Returns the student for valid credentials; the error never says which part was wrong."""
    student = db.get_student_by_email(email)
    if not student or not security.verify_password(password, student.password_hash):
        raise AuthenticationError("Invalid email or password")
    return student


def get_student_from_token(db: DatabaseService, token: Optional[str]):
    if not token:
        raise AuthenticationError("Not authorized, no token")
    student_id = security.decode_access_token(token)
    student = db.get_student_by_id(student_id)
    if not student:
        raise AuthenticationError("Not authorized, student not found")
    return student
